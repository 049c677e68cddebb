import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Generator, Iterable, List, Optional

from sqlalchemy import create_engine, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker, scoped_session, Session
from sqlalchemy.pool import StaticPool

from tweet_categorizer.config.config import Config
from .models import Base, ProcessedTweet

logger = logging.getLogger(__name__)


class AlreadyProcessedError(Exception):
    """The tweet id is already stored"""


class DatabaseManager:
    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url or Config.DATABASE_URL

        if self.database_url in ('sqlite://', 'sqlite:///:memory:'):
            # One shared connection, otherwise every session sees an empty database
            self.engine = create_engine(
                self.database_url,
                connect_args={'check_same_thread': False},
                poolclass=StaticPool
            )
        else:
            self.engine = create_engine(self.database_url)

        self.SessionFactory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.ScopedSession = scoped_session(self.SessionFactory)

    def init_db(self) -> None:
        """Initialize the database, creating all tables"""
        try:
            Base.metadata.create_all(self.engine)
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Error initializing database: {e}")
            raise

    def drop_db(self) -> None:
        """Drop all tables (useful for testing)"""
        try:
            Base.metadata.drop_all(self.engine)
            logger.info("Database tables dropped successfully")
        except Exception as e:
            logger.error(f"Error dropping database tables: {e}")
            raise

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session with automatic cleanup"""
        session = self.ScopedSession()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        finally:
            session.close()
            self.ScopedSession.remove()

    def mark_processed(self, tweet_id: str, tweet_url: Optional[str] = None,
                       category: Optional[str] = None, tweet_text: Optional[str] = None) -> Dict:
        """Store a processed tweet. Raises AlreadyProcessedError on duplicates."""
        try:
            with self.get_session() as session:
                tweet = ProcessedTweet(
                    id=tweet_id,
                    tweet_url=tweet_url or None,
                    category=category or None,
                    tweet_text=tweet_text or None,
                    processed_at=datetime.now()
                )
                session.add(tweet)
                session.flush()
                return tweet.to_dict()
        except IntegrityError as e:
            raise AlreadyProcessedError(f"Tweet {tweet_id} was already processed") from e

    def is_processed(self, tweet_id: str) -> bool:
        with self.get_session() as session:
            return session.get(ProcessedTweet, tweet_id) is not None

    def get_processed_ids(self, tweet_ids: Iterable[str]) -> List[str]:
        """Subset of tweet_ids that are already stored"""
        tweet_ids = list(tweet_ids)
        if not tweet_ids:
            return []
        with self.get_session() as session:
            rows = session.query(ProcessedTweet.id).filter(ProcessedTweet.id.in_(tweet_ids)).all()
            return [row[0] for row in rows]

    def get_tweets_by_category(self, category: str, limit: int = 100) -> List[Dict]:
        with self.get_session() as session:
            tweets = session.query(ProcessedTweet)\
                .filter(ProcessedTweet.category == category)\
                .order_by(ProcessedTweet.processed_at, ProcessedTweet.id)\
                .limit(limit)\
                .all()
            return [tweet.to_dict() for tweet in tweets]

    def count_by_category(self) -> Dict[str, int]:
        with self.get_session() as session:
            rows = session.query(ProcessedTweet.category, func.count(ProcessedTweet.id))\
                .filter(ProcessedTweet.category.isnot(None))\
                .group_by(ProcessedTweet.category)\
                .all()
            return {category: count for category, count in rows}
