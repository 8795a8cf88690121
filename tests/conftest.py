import pytest
from pathlib import Path

from resume_extractor.core.exceptions import DocumentReadError
from resume_extractor.core.resume_parser import ResumeParser
from resume_extractor.core.vocabulary import clear_vocabulary_cache


@pytest.fixture(autouse=True)
def fresh_vocabulary_cache():
    """Each test starts without cached vocabularies"""
    clear_vocabulary_cache()
    yield
    clear_vocabulary_cache()


@pytest.fixture
def sample_resume_text():
    """Fixture to provide OCR text of a scanned resume"""
    return (
        "Curriculum Vitae\n"
        "Rahul Vijay Patil\n"
        "Pune, Maharashtra, India\n"
        "Mobile: +91 98765 43210\n"
        "Email: Rahul.Patil@Gmail.com, rvpatil@yahoo.co.in\n"
        "Career Summary\n"
        "Experienced Python developer with Django, SQL and Docker.\n"
        "Education\n"
        "B.E in Computer Engineering, MBA\n"
    )


@pytest.fixture
def skills_terms():
    return ["Python", "Java", "Django", "SQL", "Docker"]


@pytest.fixture
def qualification_terms():
    return ["B.E", "MBA", "MCA", "BE"]


@pytest.fixture
def vocabulary_files(tmp_path, skills_terms, qualification_terms):
    """Skill and qualification files written with stray blanks and padding"""
    skills_file = tmp_path / "skills.txt"
    skills_file.write_text("\n".join(f"  {t}  " for t in skills_terms) + "\n\n", encoding="utf-8")
    qualifications_file = tmp_path / "qualification.txt"
    qualifications_file.write_text("\n".join(qualification_terms) + "\n", encoding="utf-8")
    return skills_file, qualifications_file


@pytest.fixture
def resume_parser(vocabulary_files):
    """Fixture to provide ResumeParser instance backed by the test vocabularies"""
    skills_file, qualifications_file = vocabulary_files
    return ResumeParser(skills=skills_file, qualifications=qualifications_file)


class StubDocumentReader:
    """Stands in for OCR: returns canned text per file name, raises for the rest"""

    def __init__(self, texts):
        self.texts = texts
        self.calls = []

    def read_document(self, file_path):
        name = Path(file_path).name
        self.calls.append(name)
        if name not in self.texts:
            raise DocumentReadError(str(file_path), f"Unable to read {name}")
        value = self.texts[name]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def stub_reader_factory():
    return StubDocumentReader
