import logging
import re
from typing import List, Tuple

from .data_models import ContactInfo

logger = logging.getLogger(__name__)


class ContactExtractor:
    """Phone number and email extraction by pattern priority"""

    def __init__(self):
        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns once; order is priority"""
        self.phone_patterns = [
            # +91 98765 43210, +91-98765-43210
            re.compile(r'\+91[\s\-\.]?\d{5}[\s\-\.]?\d{5}'),
            # (022) 2345-6789, 987-654-3210
            re.compile(r'\(?\d{3,4}\)?[\s\-\.]?\d{3,5}[\s\-\.]?\d{3,5}'),
            # 9876543210
            re.compile(r'\d{10}'),
        ]
        self.phone_noise = re.compile(r'[\s\-\.()+]')
        self.email_pattern = re.compile(r'[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9.-]+')

    def extract(self, text: str) -> ContactInfo:
        primary_email, other_emails = self.extract_emails(text)
        return ContactInfo(
            phone_number=self.extract_phone(text),
            primary_email=primary_email,
            other_emails=tuple(other_emails),
        )

    def extract_phone(self, text: str) -> str:
        """Return the first phone number found, digits only"""
        if not text or not text.strip():
            return ""

        for pattern in self.phone_patterns:
            match = pattern.search(text)
            if match:
                phone = self.phone_noise.sub('', match.group(0))
                logger.debug(f"Phone matched by pattern {pattern.pattern!r}")
                return phone

        return ""

    def extract_emails(self, text: str) -> Tuple[str, List[str]]:
        """Return the primary email and the remaining distinct emails in text order"""
        if not text or not text.strip():
            return "", []

        emails = []
        for match in self.email_pattern.finditer(text):
            email = match.group(0).strip().lower()
            if email not in emails:
                emails.append(email)

        if not emails:
            return "", []

        return emails[0], emails[1:]
