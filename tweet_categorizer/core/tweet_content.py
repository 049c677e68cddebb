"""
Text extraction from tweet payloads of unknown shape.

Payloads come from several scrapers and API versions, so a fixed table of
recognized shapes is tried in priority order. Earlier shapes are trusted more
than later ones; the order of SHAPE_MATCHERS must not change.
"""
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Tuple

from tweet_categorizer.config.constants import MAX_SERIALIZED_LENGTH, TRUNCATION_MARKER

logger = logging.getLogger(__name__)


class ContentShape(Enum):
    EMPTY = 'empty'
    PLAIN = 'plain'
    FULL_TEXT = 'full_text'
    TEXT = 'text'
    CONTENT = 'content'
    AUTHORED = 'authored'
    ENTITIES = 'entities'
    NESTED = 'nested'
    UNSTRUCTURED = 'unstructured'


@dataclass(frozen=True)
class ExtractedContent:
    text: str
    shape: ContentShape


def _field(data: Any, key: str) -> Optional[Any]:
    """Non-empty value of ``key`` when ``data`` is a mapping"""
    if isinstance(data, Mapping):
        value = data.get(key)
        if value:
            return value
    return None


def _full_text(tweet: Mapping) -> Optional[str]:
    return _field(tweet, 'fullText')


def _text(tweet: Mapping) -> Optional[str]:
    return _field(tweet, 'text')


def _content(tweet: Mapping) -> Optional[str]:
    return _field(tweet, 'content')


def _authored(tweet: Mapping) -> Optional[str]:
    author = _field(tweet, 'tweetBy')
    raw_content = _field(tweet, 'rawContent')
    if author and raw_content:
        user_name = _field(author, 'userName') or _field(author, 'name') or 'user'
        return f"Tweet by @{user_name}: {raw_content}"
    return None


def _entities(tweet: Mapping) -> Optional[str]:
    entities = _field(tweet, 'entities')
    return _field(entities, 'description') or _field(entities, 'text')


def _nested(tweet: Mapping) -> Optional[str]:
    return _field(_field(tweet, 'tweet'), 'text') or _field(_field(tweet, 'data'), 'text')


SHAPE_MATCHERS: List[Tuple[ContentShape, Callable[[Mapping], Optional[str]]]] = [
    (ContentShape.FULL_TEXT, _full_text),
    (ContentShape.TEXT, _text),
    (ContentShape.CONTENT, _content),
    (ContentShape.AUTHORED, _authored),
    (ContentShape.ENTITIES, _entities),
    (ContentShape.NESTED, _nested),
]


def serialize_truncated(tweet: Any) -> str:
    """Compact JSON of the whole payload, cut to MAX_SERIALIZED_LENGTH"""
    try:
        serialized = json.dumps(tweet, separators=(',', ':'), ensure_ascii=False, default=str)
    except (TypeError, ValueError, RecursionError) as e:
        # circular references, unsortable keys or very deep nesting
        logger.warning(f"Could not serialize tweet payload: {e}")
        serialized = f"<{type(tweet).__name__}>"
    return serialized[:MAX_SERIALIZED_LENGTH] + TRUNCATION_MARKER


def extract_content(tweet: Any) -> ExtractedContent:
    """Extract classifiable text and report which shape it came from"""
    if tweet is None:
        return ExtractedContent('', ContentShape.EMPTY)

    # False, 0 and friends carry no text
    if isinstance(tweet, (bool, int, float)) and not tweet:
        return ExtractedContent('', ContentShape.EMPTY)

    if isinstance(tweet, str):
        return ExtractedContent(tweet, ContentShape.PLAIN)

    if isinstance(tweet, Mapping):
        for shape, matcher in SHAPE_MATCHERS:
            text = matcher(tweet)
            if text:
                return ExtractedContent(str(text), shape)
        logger.debug("Unrecognized tweet payload, falling back to serialized form")
        return ExtractedContent(serialize_truncated(tweet), ContentShape.UNSTRUCTURED)

    if isinstance(tweet, (list, tuple)):
        return ExtractedContent(serialize_truncated(tweet), ContentShape.UNSTRUCTURED)

    return ExtractedContent(str(tweet), ContentShape.PLAIN)


def extract_tweet_content(tweet: Any) -> str:
    """Extract classifiable text from a tweet payload. Never raises."""
    return extract_content(tweet).text
