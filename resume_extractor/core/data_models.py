from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple, Union


class ParsedName(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    father_name: str = ""

    @classmethod
    def from_parts(cls, first_name: str = "", middle_name: str = "", last_name: str = "") -> "ParsedName":
        """Build a name record, mapping the middle name onto the father's name.

        Regional resume formats write the father's given name in the middle
        position, so the middle name is reported as the father name as well.
        """
        return cls(
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            father_name=middle_name,
        )


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    phone_number: str = ""
    primary_email: str = ""
    other_emails: Tuple[str, ...] = ()


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str = ""
    state: str = ""


class ExtractionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: ParsedName = Field(default_factory=ParsedName)
    contact: ContactInfo = Field(default_factory=ContactInfo)
    location: Location = Field(default_factory=Location)
    skills: Tuple[str, ...] = ()
    qualifications: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Convert to the required JSON structure"""
        return {
            "firstName": self.name.first_name,
            "middleName": self.name.middle_name,
            "lastName": self.name.last_name,
            "fatherName": self.name.father_name,
            "phoneNumber": self.contact.phone_number,
            "primaryEmail": self.contact.primary_email,
            "otherEmails": list(self.contact.other_emails),
            "qualifications": list(self.qualifications),
            "skills": list(self.skills),
            "city": self.location.city,
            "state": self.location.state,
        }


class ExtractionSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    document_id: str
    result: ExtractionResult

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict:
        return self.result.to_dict()


class ExtractionFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    document_id: str
    error: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {"file": self.document_id, "error": self.error}


DocumentOutcome = Union[ExtractionSuccess, ExtractionFailure]


class ProcessingMetrics(BaseModel):
    total_files: int = 0
    processed: int = 0
    failed: int = 0
    success_rate: float = 0.0
    processing_time: float = 0.0
    files_per_second: float = 0.0
    memory_usage: float = 0.0
    output_file: Optional[str] = None
