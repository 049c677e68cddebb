import logging
from typing import Optional

from flask import Flask, Blueprint, current_app, jsonify, request
from flask_cors import CORS

from tweet_categorizer.config.config import Config
from tweet_categorizer.core.ai_categorization import TweetCategorizer
from tweet_categorizer.core.tweet_content import extract_tweet_content
from tweet_categorizer.database.db import DatabaseManager, AlreadyProcessedError

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__, url_prefix='/api')


def _categorizer() -> TweetCategorizer:
    return current_app.extensions['tweet_categorizer']


def _db() -> DatabaseManager:
    return current_app.extensions['tweet_db']


@api.route('/categories', methods=['GET'])
def categories():
    """List the category vocabulary with stored tweet counts"""
    try:
        counts = _db().count_by_category()
        return jsonify({
            'categories': [{
                'name': descriptor.name,
                'description': descriptor.description,
                'count': counts.get(descriptor.name, 0)
            } for descriptor in _categorizer().vocabulary],
            'default': _categorizer().vocabulary.default,
            'totalProcessed': sum(counts.values())
        })
    except Exception as e:
        logger.error(f"Error fetching categories: {e}")
        return jsonify({'error': 'Failed to fetch categories'}), 500


@api.route('/process-tweet', methods=['POST'])
def process_tweet():
    """Mark a tweet as processed, categorizing it first when asked to"""
    body = request.get_json(silent=True) or {}
    tweet_id = body.get('tweetId')
    tweet_url = body.get('tweet_url')
    tweet_data = body.get('tweet_data')
    category = body.get('category')
    auto_categorize = body.get('auto_categorize')

    if not tweet_id:
        return jsonify({'error': 'Tweet ID is required'}), 400

    categorizer = _categorizer()
    final_category = category
    tweet_text = ''

    if auto_categorize and not category and tweet_data:
        result = categorizer.classify(tweet_data, tweet_url)
        final_category = result.category
        tweet_text = result.source_text
        logger.info(f"Auto-categorized tweet {tweet_id} as: {final_category} ({result.provenance.value})")
    elif category is not None and category != '':
        # a list or object would not even hash against the vocabulary
        if not isinstance(category, str) or category not in categorizer.vocabulary:
            return jsonify({
                'error': 'Invalid category',
                'validCategories': categorizer.vocabulary.names
            }), 400
        if tweet_data:
            tweet_text = extract_tweet_content(tweet_data)

    try:
        _db().mark_processed(
            str(tweet_id),
            tweet_url=tweet_url,
            category=final_category,
            tweet_text=tweet_text
        )
    except AlreadyProcessedError:
        return jsonify({'error': 'Tweet already processed', 'tweetId': tweet_id}), 409
    except Exception as e:
        logger.error(f"Error processing tweet: {e}")
        return jsonify({'error': 'Failed to process tweet'}), 500

    return jsonify({
        'success': True,
        'message': 'Tweet marked as processed',
        'category': final_category
    })


@api.route('/tweets/<category>', methods=['GET'])
def tweets_by_category(category):
    """Stored tweets for one category, oldest first"""
    if category not in _categorizer().vocabulary:
        return jsonify({
            'error': 'Invalid category',
            'validCategories': _categorizer().vocabulary.names
        }), 400

    limit = request.args.get('limit', 100, type=int)
    try:
        tweets = _db().get_tweets_by_category(category, limit=limit)
    except Exception as e:
        logger.error(f"Error fetching tweets for {category}: {e}")
        return jsonify({'error': 'Failed to fetch tweets'}), 500

    return jsonify({'category': category, 'tweets': tweets, 'count': len(tweets)})


@api.route('/check-new-tweets', methods=['POST'])
def check_new_tweets():
    """Return the ids from the request that have not been processed yet"""
    body = request.get_json(silent=True) or {}
    tweet_ids = body.get('tweetIds')
    if not isinstance(tweet_ids, list):
        return jsonify({'error': 'tweetIds must be a list'}), 400

    tweet_ids = [str(tweet_id) for tweet_id in tweet_ids]
    try:
        processed = set(_db().get_processed_ids(tweet_ids))
    except Exception as e:
        logger.error(f"Error checking tweets: {e}")
        return jsonify({'error': 'Failed to check tweets'}), 500

    new_ids = [tweet_id for tweet_id in tweet_ids if tweet_id not in processed]
    return jsonify({
        'newTweetIds': new_ids,
        'total': len(tweet_ids),
        'new': len(new_ids)
    })


def create_app(config=None, categorizer: Optional[TweetCategorizer] = None,
               db_manager: Optional[DatabaseManager] = None) -> Flask:
    """Application factory. Collaborators can be injected for testing."""
    config = config or Config
    app = Flask(__name__)
    app.config['DEBUG'] = config.DEBUG

    if categorizer is None:
        config.validate()
        categorizer = TweetCategorizer.from_config(config)

    if db_manager is None:
        db_manager = DatabaseManager(config.DATABASE_URL)
        db_manager.init_db()

    app.extensions['tweet_categorizer'] = categorizer
    app.extensions['tweet_db'] = db_manager
    app.register_blueprint(api)
    CORS(app)

    logger.info("✅ Tweet categorizer app initialized")
    return app
