"""
Core functionality for Tweet Categorizer.
This package contains the rate limiter, tweet text extraction,
rule-based categorization and the AI categorization pipeline.
"""

from .ai_categorization import TweetCategorizer, ClassificationResult, Provenance
from .rate_limiter import RateLimiter

__all__ = [
    'TweetCategorizer',
    'ClassificationResult',
    'Provenance',
    'RateLimiter'
]
