import logging

from tweet_categorizer.web.server import create_app

# Set up logging
logging_format = '%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
logging.basicConfig(level=logging.INFO, format=logging_format)
logger = logging.getLogger(__name__)

logger.info("=" * 50)
logger.info("Initializing WSGI Application")

try:
    application = create_app()
    logger.info("✅ Successfully created Flask application")
except Exception as e:
    logger.error(f"Error creating application: {e}")
    raise

if __name__ == '__main__':
    application.run(debug=application.config['DEBUG'])
