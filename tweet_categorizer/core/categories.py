import string
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from tweet_categorizer.config.constants import TWEET_CATEGORIES, DEFAULT_CATEGORY


@dataclass(frozen=True)
class CategoryDescriptor:
    """Human-readable description and representative keywords for one category"""
    name: str
    description: str
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def description_terms(self) -> List[str]:
        """Description words long enough to carry meaning on their own"""
        words = (word.strip(string.punctuation) for word in self.description.lower().split())
        return [word for word in words if len(word) > 3]

    @property
    def terms(self) -> List[str]:
        """Keywords followed by description words, without duplicates"""
        seen = []
        for term in list(self.keywords) + self.description_terms:
            if term not in seen:
                seen.append(term)
        return seen


class CategoryVocabulary:
    """Ordered, immutable set of valid category names and their descriptors.

    The declaration order is significant: every scorer breaks ties in favour
    of the category declared first.
    """

    def __init__(self, descriptors: Iterable[CategoryDescriptor], default: str):
        self._descriptors: Tuple[CategoryDescriptor, ...] = tuple(descriptors)
        if not self._descriptors:
            raise ValueError("Category vocabulary cannot be empty")

        self._by_name: Dict[str, CategoryDescriptor] = {}
        for descriptor in self._descriptors:
            if descriptor.name in self._by_name:
                raise ValueError(f"Duplicate category in vocabulary: {descriptor.name}")
            if not descriptor.description and not descriptor.keywords:
                raise ValueError(f"Category {descriptor.name} has neither description nor keywords")
            self._by_name[descriptor.name] = descriptor

        if default not in self._by_name:
            raise ValueError(f"Default category {default!r} is not part of the vocabulary")
        self._default = default

    @classmethod
    def from_dicts(cls, categories: List[Dict], default: str) -> 'CategoryVocabulary':
        return cls(
            (CategoryDescriptor(
                name=cat['name'],
                description=cat.get('description', ''),
                keywords=tuple(cat.get('keywords', ()))
            ) for cat in categories),
            default=default
        )

    @property
    def names(self) -> List[str]:
        return [descriptor.name for descriptor in self._descriptors]

    @property
    def default(self) -> str:
        return self._default

    def ordered(self, names: Optional[Iterable[str]] = None) -> List[CategoryDescriptor]:
        """Descriptors in declaration order, optionally restricted to ``names``"""
        if names is None:
            return list(self._descriptors)
        wanted = set(names)
        return [d for d in self._descriptors if d.name in wanted]

    def __contains__(self, name) -> bool:
        return name in self._by_name

    def __iter__(self):
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


def default_vocabulary() -> CategoryVocabulary:
    """Vocabulary built from the categories shipped in config.constants"""
    return CategoryVocabulary.from_dicts(TWEET_CATEGORIES, default=DEFAULT_CATEGORY)
