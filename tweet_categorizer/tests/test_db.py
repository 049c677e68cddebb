import pytest
from sqlalchemy.orm.session import Session

from tweet_categorizer.database.db import AlreadyProcessedError
from tweet_categorizer.database.models import ProcessedTweet


def test_database_initialization(db_manager):
    """Test database initialization creates tables"""
    with db_manager.get_session() as session:
        assert isinstance(session, Session)
        assert session.query(ProcessedTweet).count() == 0


def test_session_rollback_on_error(db_manager):
    """Test automatic rollback on error"""
    with pytest.raises(Exception):
        with db_manager.get_session() as session:
            session.add(ProcessedTweet(id='1', category='finance'))
            raise Exception("Test error")

    with db_manager.get_session() as session:
        assert session.query(ProcessedTweet).count() == 0


def test_mark_processed(db_manager):
    stored = db_manager.mark_processed('1', tweet_url='https://x.com/i/status/1',
                                      category='finance', tweet_text='buy low')

    assert stored['id'] == '1'
    assert stored['category'] == 'finance'
    assert stored['processed_at'] is not None
    assert db_manager.is_processed('1')
    assert not db_manager.is_processed('2')


def test_empty_values_are_stored_as_null(db_manager):
    stored = db_manager.mark_processed('1', tweet_url='', category=None, tweet_text='')
    assert stored['tweet_url'] is None
    assert stored['tweet_text'] is None
    assert stored['category'] is None


def test_duplicate_is_rejected(db_manager):
    db_manager.mark_processed('1', category='finance')
    with pytest.raises(AlreadyProcessedError):
        db_manager.mark_processed('1', category='books')

    assert db_manager.get_tweets_by_category('finance')[0]['id'] == '1'
    assert db_manager.get_tweets_by_category('books') == []


def test_get_processed_ids(db_manager):
    db_manager.mark_processed('1')
    db_manager.mark_processed('3')

    assert sorted(db_manager.get_processed_ids(['1', '2', '3'])) == ['1', '3']
    assert db_manager.get_processed_ids([]) == []


def test_count_by_category(db_manager):
    db_manager.mark_processed('1', category='finance')
    db_manager.mark_processed('2', category='finance')
    db_manager.mark_processed('3', category='books')
    db_manager.mark_processed('4')

    assert db_manager.count_by_category() == {'finance': 2, 'books': 1}


def test_get_tweets_by_category_limit(db_manager):
    for i in range(5):
        db_manager.mark_processed(str(i), category='science')

    assert len(db_manager.get_tweets_by_category('science', limit=3)) == 3


def test_get_tweets_by_category_oldest_first(db_manager):
    for tweet_id in ('1', '2', '3'):
        db_manager.mark_processed(tweet_id, category='science')

    tweets = db_manager.get_tweets_by_category('science')
    assert [tweet['id'] for tweet in tweets] == ['1', '2', '3']
