"""Extractors and the orchestrator that combines them."""

from .contact_extractor import ContactExtractor
from .location_extractor import LocationExtractor
from .name_extractor import NameExtractor
from .reference_matcher import QualificationsMatcher, ReferenceListMatcher, SkillsMatcher

__all__ = [
    'NameExtractor',
    'ContactExtractor',
    'LocationExtractor',
    'ReferenceListMatcher',
    'SkillsMatcher',
    'QualificationsMatcher',
]
