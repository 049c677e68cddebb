import pytest
from unittest.mock import Mock

from tweet_categorizer.core.ai_categorization import TweetCategorizer
from tweet_categorizer.core.categories import default_vocabulary
from tweet_categorizer.core.rate_limiter import RateLimiter
from tweet_categorizer.database.db import DatabaseManager
from tweet_categorizer.web.server import create_app


class FakeClock:
    """Millisecond clock that only moves when told to (or when slept on)"""

    def __init__(self, start=0.0):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms

    def sleep(self, ms):
        self.sleeps.append(ms)
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock(start=1_000_000.0)


@pytest.fixture
def rate_limiter(clock):
    """10 requests per minute on a fake clock"""
    return RateLimiter(10, window_ms=60_000, clock=clock, sleep=clock.sleep)


@pytest.fixture
def vocabulary():
    return default_vocabulary()


@pytest.fixture
def generator():
    """Mock text generator; set return_value or side_effect per test"""
    mock = Mock()
    mock.generate.return_value = 'programming'
    return mock


@pytest.fixture
def categorizer(generator, rate_limiter, vocabulary):
    return TweetCategorizer(generator=generator, rate_limiter=rate_limiter, vocabulary=vocabulary)


@pytest.fixture
def db_manager():
    """In-memory SQLite database manager"""
    manager = DatabaseManager('sqlite:///:memory:')
    manager.init_db()
    yield manager
    manager.drop_db()


@pytest.fixture
def client(categorizer, db_manager):
    app = create_app(categorizer=categorizer, db_manager=db_manager)
    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client
