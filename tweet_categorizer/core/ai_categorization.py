import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from tweet_categorizer.config.constants import MIN_CLASSIFIABLE_LENGTH
from .categories import CategoryVocabulary, default_vocabulary
from .gemini_client import BaseTextGenerator
from .rate_limiter import RateLimiter
from .rule_categorizer import RuleCategorizer
from .tweet_content import extract_tweet_content

logger = logging.getLogger(__name__)


class ClassificationError(Exception):
    """The remote classifier did not produce a usable answer"""


class EmptyResponseError(ClassificationError):
    pass


class Provenance(str, Enum):
    AI = 'ai'
    REPAIRED = 'repaired'
    RULES = 'rules'
    DEFAULT = 'default'


@dataclass(frozen=True)
class ClassificationResult:
    category: str
    source_text: str
    provenance: Provenance = Provenance.AI

    def to_dict(self):
        return {
            'category': self.category,
            'tweet_text': self.source_text,
            'provenance': self.provenance.value
        }


PROMPT_TEMPLATE = """
You are an expert tweet categorizer with deep knowledge of tech, business, and personal development content.

TASK: Categorize the following tweet into EXACTLY ONE of these categories:

{categories}

Tweet: "{tweet}"
Tweet URL: {url}

ANALYSIS PROCESS:
1. Carefully read the tweet content
2. Consider the main topic and purpose of the tweet
3. Match it to the most appropriate category based on the descriptions
4. If it could fit multiple categories, choose the one that best captures the primary focus

IMPORTANT GUIDELINES:
- Choose ONLY ONE category from the list above
- Do not create new categories
- Focus on the main topic, not secondary themes
- Consider what would be most useful for someone searching for this content

Your response must be ONLY the category name, nothing else. For example: "{first}" or "{last}".
"""


class TweetCategorizer:
    """Assigns every tweet exactly one category from the vocabulary.

    The model is asked first. A malformed answer is repaired against the
    vocabulary and the tweet text; a failed call falls back to keyword rules.
    ``classify`` never raises.
    """

    def __init__(self, generator: BaseTextGenerator, rate_limiter: RateLimiter,
                 vocabulary: Optional[CategoryVocabulary] = None,
                 max_output_tokens: int = 10, temperature: float = 0.1):
        self.generator = generator
        self.rate_limiter = rate_limiter
        self.vocabulary = vocabulary or default_vocabulary()
        self.rules = RuleCategorizer(self.vocabulary)
        self.max_output_tokens = max_output_tokens
        self.temperature = temperature

    @classmethod
    def from_config(cls, config, generator: Optional[BaseTextGenerator] = None) -> 'TweetCategorizer':
        """Build a categorizer with its own rate limiter from a Config object"""
        if generator is None:
            from .gemini_client import GeminiTextGenerator
            generator = GeminiTextGenerator(api_key=config.GEMINI_API_KEY, model=config.GEMINI_MODEL)
        return cls(
            generator=generator,
            rate_limiter=RateLimiter.per_minute(config.CLASSIFIER_REQUESTS_PER_MINUTE),
            max_output_tokens=config.CLASSIFIER_MAX_OUTPUT_TOKENS,
            temperature=config.CLASSIFIER_TEMPERATURE
        )

    def build_prompt(self, text: str, source_url: Optional[str]) -> str:
        categories = '\n'.join(
            f"- {descriptor.name}: {descriptor.description}" for descriptor in self.vocabulary
        )
        names = self.vocabulary.names
        return PROMPT_TEMPLATE.format(
            categories=categories,
            tweet=text,
            url=source_url or '',
            first=names[0],
            last=names[-1]
        )

    def ask_model(self, text: str, source_url: Optional[str] = None) -> str:
        """Raw, normalized category name from the model. Failures propagate."""
        prompt = self.build_prompt(text, source_url)

        self.rate_limiter.acquire()
        generated = self.generator.generate(
            prompt,
            max_output_tokens=self.max_output_tokens,
            temperature=self.temperature
        )

        answer = (generated or '').strip().lower()
        if not answer:
            raise EmptyResponseError("Model returned an empty answer")
        return answer

    def _from_rules(self, text: str) -> ClassificationResult:
        category, score = self.rules.categorize_with_score(text)
        provenance = Provenance.RULES if score > 0 else Provenance.DEFAULT
        return ClassificationResult(category, text, provenance)

    def classify(self, tweet: Any, source_url: Optional[str] = None) -> ClassificationResult:
        """Categorize a tweet payload of any shape"""
        try:
            text = extract_tweet_content(tweet)
        except Exception as e:
            logger.error(f"Error extracting tweet content: {e}")
            text = ''

        if not text or len(text.strip()) < MIN_CLASSIFIABLE_LENGTH:
            logger.info("Could not extract meaningful content from tweet")
            return ClassificationResult(self.vocabulary.default, text, Provenance.DEFAULT)

        try:
            answer = self.ask_model(text, source_url)
        except Exception as e:
            logger.error(f"Error categorizing tweet with Gemini: {e}")
            return self._from_rules(text)

        if answer in self.vocabulary:
            return ClassificationResult(answer, text, Provenance.AI)

        logger.info(f"Invalid category returned by Gemini: \"{answer}\", finding best match...")
        category, source = self.rules.repair(answer, text)
        logger.info(f"Mapped invalid category \"{answer}\" to \"{category}\" ({source})")
        return ClassificationResult(category, text, Provenance(source))
