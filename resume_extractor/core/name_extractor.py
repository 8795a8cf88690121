import logging
import re
from typing import List

from .data_models import ParsedName
from config.settings import settings

logger = logging.getLogger(__name__)

# Lines containing these are section headings, never names
SECTION_KEYWORDS = ("summary", "education", "contact", "experience", "skills")

MIN_NAME_LINE_LENGTH = 5
MIN_NAME_WORDS = 2
MAX_NAME_WORDS = 4


class NameExtractor:
    """Find the candidate's name near the top of the OCR text"""

    def __init__(self, search_lines: int = None):
        self.search_lines = search_lines if search_lines is not None else settings.NAME_SEARCH_LINES
        self._line_split = re.compile(r'[\r\n]')

    def extract(self, text: str) -> ParsedName:
        """Return the parsed name, or an empty record when no line qualifies"""
        if not text or not text.strip():
            return ParsedName()

        full_name = self._find_name_line(text)
        if not full_name:
            logger.debug(f"No name candidate in the first {self.search_lines} lines")
            return ParsedName()

        return self._split_name(full_name)

    def _find_name_line(self, text: str) -> str:
        """Pick the candidate line with the most words; the earliest wins ties"""
        lines = [line for line in self._line_split.split(text) if line]

        best_candidate = ""
        best_score = 0
        for line in lines[:self.search_lines]:
            line = line.strip()
            words = self._candidate_words(line)
            if words and len(words) > best_score:
                best_candidate = line
                best_score = len(words)

        return best_candidate

    def _candidate_words(self, line: str) -> List[str]:
        """Words of a line that could be a name, empty when it cannot be"""
        if len(line) < MIN_NAME_LINE_LENGTH:
            return []

        for ch in line:
            if ch.isdigit() or not (ch.isalpha() or ch.isspace()):
                return []

        lowered = line.lower()
        if any(keyword in lowered for keyword in SECTION_KEYWORDS):
            return []

        words = [word for word in line.split(' ') if word]
        if not MIN_NAME_WORDS <= len(words) <= MAX_NAME_WORDS:
            return []

        if not all(word[0].isupper() for word in words):
            return []

        return words

    def _split_name(self, full_name: str) -> ParsedName:
        parts = full_name.split()

        if len(parts) == 1:
            return ParsedName.from_parts(first_name=capitalize(parts[0]))
        if len(parts) == 2:
            return ParsedName.from_parts(
                first_name=capitalize(parts[0]),
                last_name=capitalize(parts[1]),
            )
        if len(parts) == 3:
            return ParsedName.from_parts(
                first_name=capitalize(parts[0]),
                middle_name=capitalize(parts[1]),
                last_name=capitalize(parts[2]),
            )

        # Multi-word middle names keep their original casing
        return ParsedName.from_parts(
            first_name=capitalize(parts[0]),
            middle_name=" ".join(parts[1:-1]),
            last_name=capitalize(parts[-1]),
        )


def capitalize(word: str) -> str:
    """Upper-case the first letter and lower-case the rest"""
    if not word or not word.strip():
        return ""
    return word[0].upper() + word[1:].lower()
