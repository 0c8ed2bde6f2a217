import re

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, constr, field_validator
from pydantic.alias_generators import to_camel

from app.models.student import BloodGroup, Gender, StudentStatus

_ALPHA_RE = re.compile(r"^[A-Za-z]+$")

RequiredStr = constr(strip_whitespace=True, min_length=1)


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python and in storage."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserName(CamelModel):
    first_name: constr(strip_whitespace=True, min_length=1, max_length=15)
    middle_name: str | None = None
    last_name: constr(strip_whitespace=True, min_length=1)

    @field_validator("first_name")
    @classmethod
    def first_name_must_be_capitalized(cls, value: str) -> str:
        capitalized = value[:1].upper() + value[1:].lower()
        if capitalized != value:
            raise ValueError(f"{value} is not capitalize")
        return value

    @field_validator("last_name")
    @classmethod
    def last_name_must_be_alphabetic(cls, value: str) -> str:
        if not _ALPHA_RE.match(value):
            raise ValueError(f"{value} is not valid")
        return value


class Guardian(CamelModel):
    father_name: RequiredStr
    father_occupation: RequiredStr
    father_contact_no: RequiredStr
    mother_name: RequiredStr
    mother_occupation: RequiredStr
    mother_contact_no: RequiredStr


class LocalGuardian(CamelModel):
    name: RequiredStr
    occupation: RequiredStr
    contact_no: RequiredStr
    address: RequiredStr


class StudentCreateIn(CamelModel):
    id: constr(strip_whitespace=True, min_length=1, max_length=64)
    password: constr(min_length=1, max_length=20)
    name: UserName
    gender: Gender
    date_of_birth: str | None = None
    email: RequiredStr
    contact_no: RequiredStr
    emergency_contact_no: RequiredStr
    blood_group: BloodGroup | None = None
    present_address: RequiredStr
    permanent_address: RequiredStr
    guardian: Guardian
    local_guardian: LocalGuardian
    profile_img: str | None = None
    is_active: StudentStatus = StudentStatus.ACTIVE

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, value: str) -> str:
        # bare address only, no "Name <addr>" form; stored as sent
        if "<" in value or ">" in value:
            raise ValueError(f"{value} is not a valid email type")
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"{value} is not a valid email type") from e
        return value


# Read models carry no write rules: rows are shown as stored.


class UserNameOut(CamelModel):
    first_name: str
    middle_name: str | None = None
    last_name: str


class GuardianOut(CamelModel):
    father_name: str
    father_occupation: str
    father_contact_no: str
    mother_name: str
    mother_occupation: str
    mother_contact_no: str


class LocalGuardianOut(CamelModel):
    name: str
    occupation: str
    contact_no: str
    address: str


class StudentOut(CamelModel):
    id: str
    # always blank: the ORM redacts it after writes and loads
    password: str = ""
    name: UserNameOut
    gender: Gender
    date_of_birth: str | None = None
    email: str
    contact_no: str
    emergency_contact_no: str
    blood_group: BloodGroup | None = None
    present_address: str
    permanent_address: str
    guardian: GuardianOut
    local_guardian: LocalGuardianOut
    profile_img: str | None = None
    is_active: StudentStatus
    is_deleted: bool
