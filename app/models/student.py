from __future__ import annotations

import datetime as dt
import enum
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Enum,
    Integer,
    String,
    Text,
    event,
    inspect,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.orm.attributes import set_committed_value

from app.core.security import hash_password
from app.db.base_class import Base


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class BloodGroup(str, enum.Enum):
    A_POS = "A+"
    A_NEG = "A-"
    B_POS = "B+"
    B_NEG = "B-"
    AB_POS = "AB+"
    AB_NEG = "AB-"
    O_POS = "O+"
    O_NEG = "O-"


class StudentStatus(str, enum.Enum):
    ACTIVE = "active"
    BLOCK = "block"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class Student(Base):
    __tablename__ = "students"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    # embedded documents: {first_name, middle_name, last_name}
    name: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    gender: Mapped[Gender] = mapped_column(
        Enum(Gender, name="gender_enum", values_callable=_enum_values),
        nullable=False,
    )
    date_of_birth: Mapped[str | None] = mapped_column(Text)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    contact_no: Mapped[str] = mapped_column(Text, nullable=False)
    emergency_contact_no: Mapped[str] = mapped_column(Text, nullable=False)
    blood_group: Mapped[BloodGroup | None] = mapped_column(
        Enum(BloodGroup, name="blood_group_enum", values_callable=_enum_values)
    )
    present_address: Mapped[str] = mapped_column(Text, nullable=False)
    permanent_address: Mapped[str] = mapped_column(Text, nullable=False)
    guardian: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    local_guardian: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    profile_img: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[StudentStatus] = mapped_column(
        Enum(StudentStatus, name="student_status_enum", values_callable=_enum_values),
        default=StudentStatus.ACTIVE,
        nullable=False,
    )
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(tz=dt.UTC),
        nullable=False,
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(tz=dt.UTC),
        onupdate=lambda: dt.datetime.now(tz=dt.UTC),
        nullable=False,
    )


# --- lifecycle hooks
# The stored column only ever holds a bcrypt hash; the in-memory attribute is
# blanked after every write and every load so the hash never leaves the ORM.


def _redact_password(target: Student) -> None:
    # committed value: does not mark the instance dirty
    set_committed_value(target, "password", "")


@event.listens_for(Student, "before_insert")
def _hash_password_on_insert(mapper, connection, target: Student) -> None:
    target.password = hash_password(target.password)


@event.listens_for(Student, "before_update")
def _hash_password_on_update(mapper, connection, target: Student) -> None:
    if inspect(target).attrs.password.history.has_changes():
        target.password = hash_password(target.password)


@event.listens_for(Student, "after_insert")
@event.listens_for(Student, "after_update")
def _redact_password_after_write(mapper, connection, target: Student) -> None:
    _redact_password(target)


@event.listens_for(Student, "load")
def _redact_password_on_load(target: Student, context) -> None:
    _redact_password(target)


@event.listens_for(Student, "refresh")
def _redact_password_on_refresh(target: Student, context, attrs) -> None:
    if attrs is None or "password" in attrs:
        _redact_password(target)
