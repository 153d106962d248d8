from typing import Optional

from pydantic import BaseModel, Field, field_validator

CONTACT_FIELDS = (
    "fathersName",
    "fathersNumber",
    "mothersName",
    "mothersNumber",
    "guardian",
    "guardiansNumber",
    "address",
)


class UserSummary(BaseModel):
    id: str
    name: Optional[str] = None
    schoolId: Optional[str] = None


class DutyUserSummary(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    group: Optional[str] = Field(None, description="Group name")


class ContactInfoUpdate(BaseModel):
    """
    Partial update of a student's family/contact fields.

    Each field is cleaned on its own: strings are trimmed, and an empty
    string or any non-string value (null, number, bool, object) becomes
    None, meaning "leave the stored value untouched".
    """

    fathersName: Optional[str] = Field(None, max_length=255)
    fathersNumber: Optional[str] = Field(None, max_length=32)
    mothersName: Optional[str] = Field(None, max_length=255)
    mothersNumber: Optional[str] = Field(None, max_length=32)
    guardian: Optional[str] = Field(None, max_length=255)
    guardiansNumber: Optional[str] = Field(None, max_length=32)
    address: Optional[str] = Field(None, max_length=255)

    @field_validator(*CONTACT_FIELDS, mode="before")
    @classmethod
    def clean_string(cls, value):
        if isinstance(value, str):
            return value.strip() or None
        return None

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)
