import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .contact_extractor import ContactExtractor
from .data_models import DocumentOutcome, ExtractionFailure, ExtractionResult, ExtractionSuccess
from .document_reader import DocumentReader
from .exceptions import DocumentReadError
from .location_extractor import LocationExtractor
from .name_extractor import NameExtractor
from .reference_matcher import QualificationsMatcher, SkillsMatcher
from .vocabulary import ReferenceVocabulary, load_vocabulary
from config.settings import settings

logger = logging.getLogger(__name__)

VocabularySource = Union[ReferenceVocabulary, Iterable[str], str, Path, None]


def _resolve_vocabulary(source: VocabularySource, default_path: Path) -> ReferenceVocabulary:
    if source is None:
        return load_vocabulary(default_path)
    if isinstance(source, ReferenceVocabulary):
        return source
    if isinstance(source, (str, Path)):
        return load_vocabulary(source)
    return ReferenceVocabulary(source)


class ResumeParser:
    """Runs every field extractor over one document's OCR text"""

    def __init__(self,
                 skills: VocabularySource = None,
                 qualifications: VocabularySource = None,
                 document_reader: Optional[DocumentReader] = None):
        """
        Args:
            skills: skill vocabulary, a path to one, or None for SKILLS_FILE
            qualifications: qualification vocabulary, a path to one, or None
                for QUALIFICATIONS_FILE
            document_reader: OCR collaborator used by parse_resume_file;
                created on first use when omitted
        """
        self.skills_vocabulary = _resolve_vocabulary(skills, settings.SKILLS_FILE)
        self.qualifications_vocabulary = _resolve_vocabulary(qualifications, settings.QUALIFICATIONS_FILE)

        self.name_extractor = NameExtractor()
        self.contact_extractor = ContactExtractor()
        self.location_extractor = LocationExtractor()
        self.skills_matcher = SkillsMatcher(self.skills_vocabulary)
        self.qualifications_matcher = QualificationsMatcher(self.qualifications_vocabulary)
        self._document_reader = document_reader

    @property
    def document_reader(self) -> DocumentReader:
        if self._document_reader is None:
            self._document_reader = DocumentReader()
        return self._document_reader

    def parse_resume_text(self, text: str) -> ExtractionResult:
        """Extract every field from recognized text. Never raises on odd input."""
        text = text or ""
        return ExtractionResult(
            name=self.name_extractor.extract(text),
            contact=self.contact_extractor.extract(text),
            location=self.location_extractor.extract(text),
            skills=tuple(self.skills_matcher.match(text)),
            qualifications=tuple(self.qualifications_matcher.match(text)),
        )

    def parse_document_text(self, document_id: str, text: str) -> ExtractionSuccess:
        return ExtractionSuccess(document_id=document_id, result=self.parse_resume_text(text))

    def parse_resume_file(self, file_path: Union[str, Path]) -> DocumentOutcome:
        """Read, OCR and parse one file. Read failures come back as ExtractionFailure."""
        document_id = Path(file_path).name
        try:
            text = self.document_reader.read_document(file_path)
        except DocumentReadError as e:
            logger.error(f"Error reading {file_path}: {e.message}")
            return ExtractionFailure(document_id=document_id, error=e.message)
        except Exception as e:
            logger.exception(f"Unexpected error reading {file_path}")
            return ExtractionFailure(document_id=document_id, error=str(e) or type(e).__name__)

        return self.parse_document_text(document_id, text)
