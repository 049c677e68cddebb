from pathlib import Path
import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base directory of the package
BASE_DIR = Path(__file__).parent.parent


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value else default


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


class Config:
    """Base configuration class"""
    # Server settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Database settings
    DATABASE_URL = os.getenv('DATABASE_URL', f'sqlite:///{BASE_DIR}/database/processed_tweets.db')

    # Model settings
    GEMINI_API_KEY = os.getenv('GEMINI_API_KEY')
    GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'gemini-1.5-flash')

    # Classifier settings. Only a category name is expected back, so the
    # output cap stays tiny and decoding stays near-deterministic.
    CLASSIFIER_REQUESTS_PER_MINUTE = _get_int('CLASSIFIER_REQUESTS_PER_MINUTE', 10)
    CLASSIFIER_MAX_OUTPUT_TOKENS = _get_int('CLASSIFIER_MAX_OUTPUT_TOKENS', 10)
    CLASSIFIER_TEMPERATURE = _get_float('CLASSIFIER_TEMPERATURE', 0.1)

    @classmethod
    def validate(cls) -> Dict[str, Any]:
        """Validate required configuration settings"""
        missing = []

        # Required settings that must be present
        required = [
            'GEMINI_API_KEY',
        ]

        for setting in required:
            if not getattr(cls, setting):
                missing.append(setting)

        if cls.CLASSIFIER_REQUESTS_PER_MINUTE < 1:
            raise ValueError("CLASSIFIER_REQUESTS_PER_MINUTE must be at least 1")

        if missing:
            raise ValueError(f"Missing required configuration settings: {', '.join(missing)}")

        return {
            'debug': cls.DEBUG,
            'database_url': cls.DATABASE_URL,
            'gemini_model': cls.GEMINI_MODEL,
            'classifier': {
                'requests_per_minute': cls.CLASSIFIER_REQUESTS_PER_MINUTE,
                'max_output_tokens': cls.CLASSIFIER_MAX_OUTPUT_TOKENS,
                'temperature': cls.CLASSIFIER_TEMPERATURE
            }
        }
