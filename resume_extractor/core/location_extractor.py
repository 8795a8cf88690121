import logging
import re

from .data_models import Location

logger = logging.getLogger(__name__)

# One or more capitalized, letters-only words separated by single spaces
_PLACE = r'[A-Z][A-Za-z]*(?: [A-Z][A-Za-z]*)*'


class LocationExtractor:
    """City and state from the first comma-delimited place phrase.

    The match is purely syntactic. Nothing is checked against a gazetteer,
    so any comma-separated run of capitalized words ("Python, Java, Docker")
    is reported as a location when it appears before the real address.
    Words must start with a capital letter, so an all-lowercase OCR line
    such as "pune, maharashtra, india" yields no location at all.
    """

    def __init__(self):
        self.city_state_country = re.compile(
            rf'\b({_PLACE}),\s*({_PLACE}),\s*(\b[A-Za-z]+\b)\b'
        )
        self.city_state = re.compile(rf'\b({_PLACE}),\s*({_PLACE})\b')

    def extract(self, text: str) -> Location:
        if not text or not text.strip():
            return Location()

        # Country is matched to anchor the three-part form but not reported
        match = self.city_state_country.search(text)
        if match:
            logger.debug("Location matched city/state/country form")
            return Location(city=match.group(1).strip(), state=match.group(2).strip())

        match = self.city_state.search(text)
        if match:
            logger.debug("Location matched city/state form")
            return Location(city=match.group(1).strip(), state=match.group(2).strip())

        return Location()
