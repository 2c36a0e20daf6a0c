# cli/model_formatters.py

# anything that renders domain objects for the console
from textwrap import dedent

import core.formatters as formatters
from models.course import Course
from models.department import Department
from models.enrollment import Enrollment
from models.student import Student

# === department formatters ===


def format_department_oneline(department: Department) -> str:
    return f"{department.id:>4} | {department.name}"


def format_department_multiline(department: Department) -> str:
    return dedent(
        f"""\
        Department:
        ... Name: {department.name}
        ... Description: {formatters.format_optional(department.description)}"""
    )


# === course formatters ===


def format_course_oneline(course: Course) -> str:
    status = "" if course.is_active else " [INACTIVE]"
    status += " [ARCHIVED]" if course.is_archived else ""
    code = formatters.format_optional(course.code, "[NO CODE]")

    return f"{course.id:>4} | {code:<10} | {course.title} ({course.credits} cr){status}"


def format_course_multiline(course: Course) -> str:
    return dedent(
        f"""\
        Course:
        ... Code: {formatters.format_optional(course.code)}
        ... Title: {formatters.format_optional(course.title)}
        ... Credits: {formatters.format_optional(course.credits)}
        ... Department id: {formatters.format_optional(course.department_id)}
        ... Status: {course.status}"""
    )


# === student formatters ===


def format_student_oneline(student: Student) -> str:
    status = " [INACTIVE]" if not student.is_active else ""

    return f"{student.id:>4} | {student.full_name:<20} | {formatters.format_optional(student.email)}{status}"


def format_student_multiline(student: Student) -> str:
    return dedent(
        f"""\
        Student:
        ... Code: {formatters.format_optional(student.code)}
        ... Name: {student.full_name}
        ... Email: {formatters.format_optional(student.email)}
        ... Date of birth: {formatters.format_date(student.date_of_birth)}
        ... Department id: {formatters.format_optional(student.department_id)}
        ... Status: {student.status}"""
    )


# === enrollment formatters ===


def format_enrollment_oneline(enrollment: Enrollment) -> str:
    return (
        f"student {enrollment.student_id:>4} | course {enrollment.course_id:>4} | "
        f"{formatters.format_date(enrollment.enroll_date)} | "
        f"{formatters.format_grade(enrollment.grade):<10} {enrollment.finalized_status}"
    )
