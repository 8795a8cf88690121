"""Exceptions raised while turning a document into text."""


class ResumeExtractorError(Exception):
    """Base exception for resume extractor errors."""

    pass


class DocumentReadError(ResumeExtractorError):
    """Raised when a document cannot be turned into text."""

    def __init__(self, document_id: str, message: str):
        super().__init__(message)
        self.document_id = document_id
        self.message = message


class UnsupportedFormatError(DocumentReadError):
    """Raised when the document type is not supported."""

    pass


class DocumentTooLargeError(DocumentReadError):
    """Raised when the document exceeds the configured size limit."""

    pass
