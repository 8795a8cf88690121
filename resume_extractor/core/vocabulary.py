"""Reference vocabularies (skills, qualifications) loaded from flat text files."""

import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, Iterator, Tuple, Union

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_vocabularies: Dict[Path, "ReferenceVocabulary"] = {}  # resolved path -> loaded vocabulary


class ReferenceVocabulary:
    """Ordered, read-only list of known terms"""

    def __init__(self, terms: Iterable[str] = (), source: str = ""):
        self._terms: Tuple[str, ...] = tuple(terms)
        self.source = source

    @property
    def terms(self) -> Tuple[str, ...]:
        return self._terms

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ReferenceVocabulary":
        """Read trimmed, non-empty lines. A missing file gives an empty vocabulary."""
        path = Path(path)
        if not path.is_file():
            logger.warning(f"Vocabulary file not found, using empty vocabulary: {path}")
            return cls((), source=str(path))

        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            terms = [line.strip() for line in f]

        vocabulary = cls((term for term in terms if term), source=str(path))
        logger.info(f"Loaded {len(vocabulary)} terms from {path}")
        return vocabulary

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __bool__(self) -> bool:
        return bool(self._terms)

    def __repr__(self) -> str:
        return f"ReferenceVocabulary({len(self._terms)} terms, source={self.source!r})"


def load_vocabulary(path: Union[str, Path]) -> ReferenceVocabulary:
    """
    Thread-safe memoized loader. Each file is read at most once per process;
    later calls return the cached vocabulary.
    """
    key = Path(path).resolve()
    if key in _vocabularies:
        return _vocabularies[key]
    with _lock:
        if key in _vocabularies:
            return _vocabularies[key]
        vocabulary = ReferenceVocabulary.from_file(key)
        _vocabularies[key] = vocabulary
        return vocabulary


def clear_vocabulary_cache():
    """Forget every cached vocabulary so the next load re-reads the file"""
    with _lock:
        _vocabularies.clear()
