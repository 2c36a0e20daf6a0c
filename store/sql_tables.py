# store/sql_tables.py

"""
SQLAlchemy ORM rows backing `SqlStore`.

Each row class converts to and from its record class with `to_record()`,
`from_record()`, and `apply()`. Rows never leave the store; callers only ever
see record objects.
"""

from __future__ import annotations

import datetime

from sqlalchemy import Boolean, Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from models.course import Course
from models.department import Department
from models.enrollment import Enrollment
from models.student import Student


class Base(DeclarativeBase):
    pass


class DepartmentRow(Base):
    __tablename__ = "department"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def to_record(self) -> Department:
        return Department(id=self.id, name=self.name, description=self.description)

    @classmethod
    def from_record(cls, record: Department) -> DepartmentRow:
        row = cls(id=record.id)
        row.apply(record)
        return row

    def apply(self, record: Department) -> None:
        self.name = record.name
        self.description = record.description


class CourseRow(Base):
    __tablename__ = "course"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    title: Mapped[str | None] = mapped_column(String(100), nullable=True)
    credits: Mapped[int | None] = mapped_column(Integer, nullable=True)
    department_id: Mapped[int | None] = mapped_column(
        ForeignKey("department.id"), nullable=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def to_record(self) -> Course:
        return Course(
            id=self.id,
            code=self.code,
            title=self.title,
            credits=self.credits,
            department_id=self.department_id,
            active=self.is_active,
            archived=self.is_archived,
        )

    @classmethod
    def from_record(cls, record: Course) -> CourseRow:
        row = cls(id=record.id)
        row.apply(record)
        return row

    def apply(self, record: Course) -> None:
        self.code = record.code
        self.title = record.title
        self.credits = record.credits
        self.department_id = record.department_id
        self.is_active = record.is_active
        self.is_archived = record.is_archived


class StudentRow(Base):
    __tablename__ = "student"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    full_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    department_id: Mapped[int | None] = mapped_column(
        ForeignKey("department.id"), nullable=True
    )
    date_of_birth: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def to_record(self) -> Student:
        return Student(
            id=self.id,
            code=self.code,
            full_name=self.full_name,
            email=self.email,
            department_id=self.department_id,
            date_of_birth=self.date_of_birth,
            active=self.is_active,
        )

    @classmethod
    def from_record(cls, record: Student) -> StudentRow:
        row = cls(id=record.id)
        row.apply(record)
        return row

    def apply(self, record: Student) -> None:
        self.code = record.code
        self.full_name = record.full_name
        self.email = record.email
        self.department_id = record.department_id
        self.date_of_birth = record.date_of_birth
        self.is_active = record.is_active


class EnrollmentRow(Base):
    __tablename__ = "enrollment"

    student_id: Mapped[int] = mapped_column(
        ForeignKey("student.id"), primary_key=True
    )
    course_id: Mapped[int] = mapped_column(ForeignKey("course.id"), primary_key=True)
    enroll_date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    grade: Mapped[float | None] = mapped_column(
        Numeric(4, 2, asdecimal=False), nullable=True
    )
    is_finalized: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def to_record(self) -> Enrollment:
        return Enrollment(
            student_id=self.student_id,
            course_id=self.course_id,
            enroll_date=self.enroll_date,
            grade=self.grade,
            finalized=self.is_finalized,
        )

    @classmethod
    def from_record(cls, record: Enrollment) -> EnrollmentRow:
        row = cls(student_id=record.student_id, course_id=record.course_id)
        row.apply(record)
        return row

    def apply(self, record: Enrollment) -> None:
        self.enroll_date = record.enroll_date
        self.grade = record.grade
        self.is_finalized = record.is_finalized
