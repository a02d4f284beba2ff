"""Product slug assignment."""

from .assigner import BackfillFailure, BackfillReport, SlugAssigner
from .errors import (
    BackfillAbortedError,
    PersistenceConflictError,
    PersistenceError,
    SlugError,
    StoreUnavailableError,
    UniquenessExhaustedError,
)
from .normalizer import fallback_candidate, is_valid_slug, normalize
from .resolver import UniquenessResolver
from .store import ProductStore, SlugCandidate
from .transliterator import PinyinTransliterator, Transliterator

__all__ = [
    "BackfillAbortedError",
    "BackfillFailure",
    "BackfillReport",
    "PersistenceConflictError",
    "PersistenceError",
    "PinyinTransliterator",
    "ProductStore",
    "SlugAssigner",
    "SlugCandidate",
    "SlugError",
    "StoreUnavailableError",
    "Transliterator",
    "UniquenessExhaustedError",
    "UniquenessResolver",
    "fallback_candidate",
    "is_valid_slug",
    "normalize",
]
