from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import ColumnElement, Row, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.student import Student
from app.schemas.students import StudentCreateIn


class StudentError(Exception):
    pass


class DuplicateStudentError(StudentError):
    def __init__(self, student_id: str):
        super().__init__(f"Student with id '{student_id}' already exists.")
        self.student_id = student_id


def not_deleted() -> ColumnElement[bool]:
    """Base predicate of every read: soft-deleted rows are invisible.

    ``IS NOT TRUE`` also keeps rows where the flag is NULL.
    """
    return Student.is_deleted.is_not(True)


def _id_taken(db: Session, student_id: str) -> bool:
    # uniqueness spans soft-deleted rows too, so no not_deleted() here
    return db.scalar(select(Student.pk).where(Student.id == student_id)) is not None


def create_student(db: Session, payload: StudentCreateIn) -> Student:
    """
    Insert a student. The password is hashed by the model's before_insert
    hook and blanked again once the row is written.
    """
    st = Student(**payload.model_dump())
    db.add(st)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _id_taken(db, payload.id):
            get_logger().warning("student.duplicate_id", student_id=payload.id)
            raise DuplicateStudentError(payload.id) from e
        raise

    db.refresh(st)
    get_logger().info("student.created", student_id=st.id)
    return st


def find(db: Session, *criteria: ColumnElement[bool]) -> list[Student]:
    stmt = select(Student).where(not_deleted(), *criteria).order_by(Student.pk)
    return list(db.scalars(stmt))


def find_one(db: Session, *criteria: ColumnElement[bool]) -> Student | None:
    stmt = select(Student).where(not_deleted(), *criteria).limit(1)
    return db.scalars(stmt).first()


def find_by_id(db: Session, student_id: str) -> Student | None:
    return find_one(db, Student.id == student_id)


def aggregate(
    db: Session,
    *columns: Any,
    where: Sequence[ColumnElement[bool]] = (),
    group_by: Sequence[Any] = (),
    order_by: Sequence[Any] = (),
) -> list[Row]:
    """
    Run a grouped/aggregate query over students.

    The soft-delete predicate sits in the WHERE clause, so it is applied
    before grouping and no later stage sees deleted rows.

    Example: ``aggregate(db, Student.gender, func.count(), group_by=[Student.gender])``
    """
    stmt = select(*columns).select_from(Student).where(not_deleted(), *where)
    if group_by:
        stmt = stmt.group_by(*group_by)
    if order_by:
        stmt = stmt.order_by(*order_by)
    return list(db.execute(stmt).all())
