import pytest
from unittest.mock import Mock

from tweet_categorizer.web.server import create_app

PROGRAMMING_TWEET = 'Check out this new python library on github for better code'


def test_categories(client, db_manager):
    db_manager.mark_processed('1', category='finance')

    response = client.get('/api/categories')
    data = response.get_json()

    assert response.status_code == 200
    assert data['default'] == 'tools_resources'
    assert len(data['categories']) == 19
    counts = {cat['name']: cat['count'] for cat in data['categories']}
    assert counts['finance'] == 1
    assert counts['books'] == 0
    assert data['totalProcessed'] == 1


def test_process_tweet_requires_id(client):
    response = client.post('/api/process-tweet', json={'category': 'finance'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Tweet ID is required'


def test_process_tweet_auto_categorize(client, generator, db_manager):
    response = client.post('/api/process-tweet', json={
        'tweetId': '100',
        'tweet_url': 'https://x.com/i/status/100',
        'tweet_data': {'fullText': PROGRAMMING_TWEET},
        'auto_categorize': True
    })

    assert response.status_code == 200
    assert response.get_json() == {
        'success': True,
        'message': 'Tweet marked as processed',
        'category': 'programming'
    }
    generator.generate.assert_called_once()
    stored = db_manager.get_tweets_by_category('programming')
    assert stored[0]['tweet_text'] == PROGRAMMING_TWEET


def test_process_tweet_auto_categorize_survives_model_failure(client, generator):
    generator.generate.side_effect = RuntimeError('quota exceeded')
    response = client.post('/api/process-tweet', json={
        'tweetId': '101',
        'tweet_data': {'text': 'stock market crash, invest wisely'},
        'auto_categorize': True
    })

    assert response.status_code == 200
    assert response.get_json()['category'] == 'finance'


def test_process_tweet_manual_category(client, generator, db_manager):
    response = client.post('/api/process-tweet', json={
        'tweetId': '102',
        'tweet_data': {'text': 'some tweet text'},
        'category': 'books'
    })

    assert response.status_code == 200
    assert response.get_json()['category'] == 'books'
    generator.generate.assert_not_called()
    assert db_manager.get_tweets_by_category('books')[0]['tweet_text'] == 'some tweet text'


def test_process_tweet_invalid_category(client):
    response = client.post('/api/process-tweet', json={'tweetId': '103', 'category': 'memes'})

    assert response.status_code == 400
    data = response.get_json()
    assert data['error'] == 'Invalid category'
    assert 'finance' in data['validCategories']


@pytest.mark.parametrize('category', [['finance'], {'name': 'finance'}, 7])
def test_process_tweet_non_string_category(client, db_manager, category):
    response = client.post('/api/process-tweet', json={'tweetId': '108', 'category': category})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Invalid category'
    assert not db_manager.is_processed('108')


def test_process_tweet_without_category(client, db_manager):
    response = client.post('/api/process-tweet', json={'tweetId': '104'})

    assert response.status_code == 200
    assert response.get_json()['category'] is None
    assert db_manager.is_processed('104')


def test_process_tweet_duplicate(client):
    client.post('/api/process-tweet', json={'tweetId': '105', 'category': 'books'})
    response = client.post('/api/process-tweet', json={'tweetId': '105', 'category': 'books'})
    assert response.status_code == 409


def test_process_tweet_storage_failure(categorizer):
    db_manager = Mock()
    db_manager.mark_processed.side_effect = RuntimeError('disk full')
    app = create_app(categorizer=categorizer, db_manager=db_manager)

    response = app.test_client().post('/api/process-tweet', json={'tweetId': '106', 'category': 'books'})

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Failed to process tweet'}


def test_tweets_by_category(client):
    client.post('/api/process-tweet', json={'tweetId': '107', 'category': 'science'})

    response = client.get('/api/tweets/science')
    data = response.get_json()

    assert response.status_code == 200
    assert data['count'] == 1
    assert data['tweets'][0]['id'] == '107'


def test_tweets_by_category_oldest_first(client):
    for tweet_id in ('109', '110', '111'):
        client.post('/api/process-tweet', json={'tweetId': tweet_id, 'category': 'books'})

    tweets = client.get('/api/tweets/books').get_json()['tweets']
    assert [tweet['id'] for tweet in tweets] == ['109', '110', '111']


def test_tweets_by_unknown_category(client):
    response = client.get('/api/tweets/memes')
    assert response.status_code == 400


def test_check_new_tweets(client):
    client.post('/api/process-tweet', json={'tweetId': '200'})

    response = client.post('/api/check-new-tweets', json={'tweetIds': ['200', 201, '202']})
    data = response.get_json()

    assert response.status_code == 200
    assert data == {'newTweetIds': ['201', '202'], 'total': 3, 'new': 2}


@pytest.mark.parametrize('body', [{}, {'tweetIds': 'abc'}])
def test_check_new_tweets_validation(client, body):
    response = client.post('/api/check-new-tweets', json=body)
    assert response.status_code == 400


def test_create_app_validates_config():
    config = Mock(DEBUG=False)
    config.validate.side_effect = ValueError('Missing required configuration settings: GEMINI_API_KEY')

    with pytest.raises(ValueError):
        create_app(config=config)
