import logging
from pathlib import Path
from typing import List
import chardet
import pytesseract
from pdf2image import convert_from_path
from pdf2image.exceptions import PDFInfoNotInstalledError, PDFPageCountError, PDFSyntaxError
from PIL import Image, ImageOps

from .exceptions import DocumentReadError, DocumentTooLargeError, UnsupportedFormatError
from config.settings import settings

logger = logging.getLogger(__name__)


class DocumentReader:
    """Turn a scanned resume (PDF or image) into raw OCR text"""

    def __init__(self, enable_ocr: bool = None, dpi: int = None, max_size: int = None):
        self.enable_ocr = enable_ocr if enable_ocr is not None else settings.ENABLE_OCR
        self.dpi = dpi or settings.OCR_DPI
        self.max_size = max_size or settings.MAX_DOCUMENT_SIZE
        self.supported_formats = {f".{ext.lower()}" for ext in settings.SUPPORTED_FORMATS}
        self._init_ocr()

    def _init_ocr(self):
        """Configure Tesseract"""
        pytesseract.pytesseract.tesseract_cmd = settings.TESSERACT_PATH
        self.ocr_params = {
            'lang': settings.OCR_LANGUAGE,
            'config': settings.OCR_CONFIG,
            'timeout': settings.OCR_TIMEOUT
        }

    def _get_file_type(self, file_path: Path) -> str:
        """Detect file type using file signatures and extension"""
        with open(file_path, 'rb') as f:
            header = f.read(8)

        if header.startswith(b'%PDF-'):
            return '.pdf'
        if header.startswith(b'\x89PNG'):
            return '.png'
        if header.startswith(b'\xff\xd8\xff'):
            return '.jpg'
        if header.startswith(b'II*\x00') or header.startswith(b'MM\x00*'):
            return '.tiff'

        # Fallback to extension-based detection
        return file_path.suffix.lower()

    def _check_file_size(self, file_path: Path) -> None:
        size = file_path.stat().st_size
        if size > self.max_size:
            raise DocumentTooLargeError(
                str(file_path),
                f"File is {size} bytes, limit is {self.max_size} bytes"
            )

    def _preprocess_image(self, image: Image.Image) -> Image.Image:
        """Grayscale and stretch contrast before OCR"""
        if not settings.OCR_PREPROCESSING:
            return image
        return ImageOps.autocontrast(ImageOps.grayscale(image))

    def _ocr_image(self, image: Image.Image) -> str:
        return pytesseract.image_to_string(self._preprocess_image(image), **self.ocr_params)

    def read_pdf(self, file_path: Path) -> str:
        """Rasterize every page and OCR it, one page after the other"""
        images = convert_from_path(str(file_path), dpi=self.dpi)
        logger.info(f"Running OCR on {len(images)} page(s) of {file_path.name}")

        pages: List[str] = []
        for image in images:
            pages.append(self._ocr_image(image))
        return "\n".join(pages)

    def read_image(self, file_path: Path) -> str:
        with Image.open(file_path) as image:
            return self._ocr_image(image)

    def read_text(self, file_path: Path) -> str:
        """Read a plain-text file, guessing its encoding"""
        raw_data = file_path.read_bytes()
        encoding = chardet.detect(raw_data[:50000])['encoding'] or 'utf-8'
        return raw_data.decode(encoding, errors='replace')

    def read_document(self, file_path) -> str:
        """Return the recognized text of one document.

        Raises:
            UnsupportedFormatError: the file type cannot be read
            DocumentTooLargeError: the file exceeds MAX_DOCUMENT_SIZE
            DocumentReadError: the file is missing or OCR failed
        """
        file_path = Path(file_path)
        document_id = str(file_path)

        if not file_path.is_file():
            raise DocumentReadError(document_id, f"File not found: {file_path}")

        self._check_file_size(file_path)
        file_type = self._get_file_type(file_path)
        if file_type not in self.supported_formats:
            raise UnsupportedFormatError(document_id, f"Unsupported file type: {file_type or 'unknown'}")

        if file_type == '.txt':
            return self.read_text(file_path)

        if not self.enable_ocr:
            raise DocumentReadError(document_id, "OCR is disabled")

        try:
            if file_type == '.pdf':
                return self.read_pdf(file_path)
            return self.read_image(file_path)
        except (pytesseract.TesseractError, PDFInfoNotInstalledError, PDFPageCountError,
                PDFSyntaxError, RuntimeError, OSError) as e:
            raise DocumentReadError(document_id, f"OCR failed: {e}") from e
