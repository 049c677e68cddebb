import logging
from typing import Iterable, List, Optional, Tuple

from .categories import CategoryVocabulary, default_vocabulary

logger = logging.getLogger(__name__)

# Which tier settled a repaired answer
MATCHED_ANSWER = 'repaired'
MATCHED_KEYWORDS = 'rules'
NO_MATCH = 'default'


def count_matches(text: str, terms: Iterable[str]) -> int:
    """Number of terms found as case-insensitive substrings of text"""
    lower_text = text.lower()
    return sum(1 for term in terms if term.lower() in lower_text)


def pick_winner(scores: List[Tuple[str, int]]) -> Optional[str]:
    """Strictly highest positive score; the earliest entry wins ties"""
    best_name, best_score = None, 0
    for name, score in scores:
        if score > best_score:
            best_name, best_score = name, score
    return best_name


class RuleCategorizer:
    """Deterministic keyword categorizer used when the model cannot be trusted"""

    def __init__(self, vocabulary: Optional[CategoryVocabulary] = None):
        self.vocabulary = vocabulary or default_vocabulary()

    def score_categories(self, text: str, categories: Optional[Iterable[str]] = None) -> List[Tuple[str, int]]:
        """Keyword match count per category, in vocabulary order"""
        text = text or ''
        return [
            (descriptor.name, count_matches(text, descriptor.keywords))
            for descriptor in self.vocabulary.ordered(categories)
        ]

    def categorize_with_score(self, text: str) -> Tuple[str, int]:
        scores = self.score_categories(text)
        winner = pick_winner(scores)
        if winner is None:
            return self.vocabulary.default, 0
        return winner, dict(scores)[winner]

    def categorize(self, text: str) -> str:
        """Best keyword match for text, or the default category"""
        category, _ = self.categorize_with_score(text)
        return category

    def best_from_content(self, candidates: Iterable[str], text: str) -> Optional[str]:
        """Pick the candidate whose descriptor terms overlap text the most.

        Returns None when no candidate scores above zero.
        """
        text = text or ''
        scores = [
            (descriptor.name, count_matches(text, descriptor.terms))
            for descriptor in self.vocabulary.ordered(candidates)
        ]
        logger.debug(f"Candidate scores: {scores}")
        return pick_winner(scores)

    def partial_matches(self, answer: str) -> List[str]:
        """Categories sharing at least one underscore-separated part with answer"""
        return [
            name for name in self.vocabulary.names
            if any(part and part in answer for part in name.split('_'))
        ]

    def find_best_match(self, answer: str, text: str) -> str:
        """Map a malformed model answer onto the vocabulary. Never raises."""
        category, _ = self.repair(answer, text)
        return category

    def _rules_with_source(self, text: str) -> Tuple[str, str]:
        category, score = self.categorize_with_score(text)
        return category, (MATCHED_KEYWORDS if score > 0 else NO_MATCH)

    def repair(self, answer: str, text: str) -> Tuple[str, str]:
        """Like find_best_match, also telling which tier decided.

        The second element is MATCHED_ANSWER when the answer itself picked the
        category, MATCHED_KEYWORDS when keyword rules did, NO_MATCH when the
        default was used.
        """
        if not answer or not answer.strip():
            return self._rules_with_source(text)

        # A verbose answer like "the category is programming"
        for name in self.vocabulary.names:
            if name in answer:
                return name, MATCHED_ANSWER

        candidates = self.partial_matches(answer)
        if candidates:
            best = self.best_from_content(candidates, text)
            if best is not None:
                return best, MATCHED_ANSWER
            logger.info(f"No content overlap for partial matches {candidates}, using rules")

        return self._rules_with_source(text)
