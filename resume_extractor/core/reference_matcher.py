"""
Whole-word matching of reference vocabularies against OCR text.

Two policies exist and are kept separate on purpose:

* SkillsMatcher lower-cases the text and turns punctuation into spaces before
  matching, then drops duplicate terms. Terms made of punctuation ("C++",
  "C#") therefore never match as written.
* QualificationsMatcher matches against the raw text and reports every
  vocabulary entry that occurs, duplicates included.
"""

import logging
import re
from typing import Iterable, List, Tuple

from .vocabulary import ReferenceVocabulary

logger = logging.getLogger(__name__)


class ReferenceListMatcher:
    """Report which vocabulary terms occur in a text as whole words"""

    def __init__(self, vocabulary: Iterable[str]):
        if not isinstance(vocabulary, ReferenceVocabulary):
            vocabulary = ReferenceVocabulary(vocabulary)
        self.vocabulary = vocabulary
        self._patterns: List[Tuple[str, re.Pattern]] = [
            (term, self._compile_term(term))
            for term in vocabulary
            if term and term.strip()
        ]

    def _compile_term(self, term: str) -> re.Pattern:
        return re.compile(rf'\b{re.escape(term)}\b', re.IGNORECASE)

    def _prepare_text(self, text: str) -> str:
        return text

    def _collect(self, found: List[str]) -> List[str]:
        return found

    def match(self, text: str) -> List[str]:
        if not text or not text.strip() or not self._patterns:
            return []

        prepared = self._prepare_text(text)
        found = [term for term, pattern in self._patterns if pattern.search(prepared)]
        logger.debug(f"{type(self).__name__}: {len(found)} of {len(self._patterns)} terms matched")
        return self._collect(found)


class SkillsMatcher(ReferenceListMatcher):
    """Punctuation-insensitive, deduplicated skill matching"""

    _punctuation = re.compile(r'[^\w\s]')

    def _compile_term(self, term: str) -> re.Pattern:
        return super()._compile_term(term.lower().strip())

    def _prepare_text(self, text: str) -> str:
        return self._punctuation.sub(' ', text.lower())

    def _collect(self, found: List[str]) -> List[str]:
        return list(dict.fromkeys(found))


class QualificationsMatcher(ReferenceListMatcher):
    """Raw-text qualification matching, one entry per matching vocabulary term"""
