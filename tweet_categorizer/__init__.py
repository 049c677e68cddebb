"""
Tweet Categorizer.
Assigns each tweet exactly one category using Gemini with a keyword fallback.
"""

__version__ = '0.1.0'
