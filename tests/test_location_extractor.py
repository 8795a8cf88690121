import pytest

from resume_extractor.core.data_models import Location
from resume_extractor.core.location_extractor import LocationExtractor


@pytest.fixture
def extractor():
    return LocationExtractor()


def test_city_state_country_drops_country(extractor):
    text = "He lives in Springfield, Illinois, USA and works remotely."
    assert extractor.extract(text) == Location(city="Springfield", state="Illinois")


def test_multi_word_segments(extractor):
    assert extractor.extract("Address: New Delhi, Delhi, India") == Location(city="New Delhi", state="Delhi")
    assert extractor.extract("Relocating to San Jose, California") == Location(city="San Jose", state="California")


def test_city_state_fallback(extractor):
    assert extractor.extract("Based in Austin, Texas") == Location(city="Austin", state="Texas")


def test_three_part_form_preferred_over_earlier_two_part(extractor):
    text = "Pune, Maharashtra\nWorked in Mumbai, Maharashtra, India"
    assert extractor.extract(text) == Location(city="Mumbai", state="Maharashtra")


def test_first_match_in_document_order(extractor):
    text = "Chennai, Tamil Nadu, India\nPreviously Kochi, Kerala, India"
    assert extractor.extract(text) == Location(city="Chennai", state="Tamil Nadu")


def test_segments_are_trimmed(extractor):
    assert extractor.extract("Springfield,    Illinois") == Location(city="Springfield", state="Illinois")


def test_comma_separated_list_is_a_known_false_positive(extractor):
    assert extractor.extract("Tools: Python, Java, Docker") == Location(city="Python", state="Java")


@pytest.mark.parametrize("text", [
    "", "   ", "no commas at all", "1, 2, 3", "lower, case, words", "address: pune, maharashtra, india",
])
def test_no_location(extractor, text):
    assert extractor.extract(text) == Location()
