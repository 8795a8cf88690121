"""Field extraction for OCR'd resumes."""

from .core.data_models import (
    ContactInfo,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    Location,
    ParsedName,
)
from .core.resume_parser import ResumeParser
from .core.vocabulary import ReferenceVocabulary, load_vocabulary

__version__ = "0.1.0"

__all__ = [
    'ResumeParser',
    'ReferenceVocabulary',
    'load_vocabulary',
    'ParsedName',
    'ContactInfo',
    'Location',
    'ExtractionResult',
    'ExtractionSuccess',
    'ExtractionFailure',
]
