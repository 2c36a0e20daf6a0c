# cli/menus/enrollments_menu.py

"""
Enrollments & Grades menu for the Course Management CLI.

Enrolls students in courses and assigns, updates, or finalizes their grades.
Input is only parsed here; `EnrollmentService` decides whether an enrollment
or grade is allowed.
"""

import datetime
from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.response import Response
from models.course import Course
from models.enrollment import Enrollment
from models.student import Student
from services.registry import ServiceRegistry


def run(services: ServiceRegistry) -> None:
    title = formatters.format_banner_text("Enrollments & Grades")
    options = [
        ("Enroll Student in Course", enroll_student),
        ("Assign Grade", assign_grade),
        ("Update Grade", update_grade),
        ("Finalize Grade", finalize_grade),
        ("View Enrollments", view_enrollments),
        ("View Enrollments for a Student", view_student_enrollments),
    ]
    zero_option = "Return to Main menu"

    helpers.run_menu(title, options, zero_option, services)

    helpers.returning_to("Main menu")


# === enroll ===


def enroll_student(services: ServiceRegistry) -> None:
    """
    Selects a student and a course and submits the enrollment.

    Notes:
        - A blank enrollment date defaults to today.
    """
    student = helpers.find_student_from_list(services)

    if student is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    student = cast(Student, student)

    course = helpers.find_course_from_list(services)

    if course is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    course = cast(Course, course)

    enroll_date = helpers.prompt_date_or_default(
        "Enter enrollment date as YYYY-MM-DD (leave blank for today):"
    )

    if enroll_date is MenuSignal.DEFAULT:
        enroll_date = datetime.date.today()
    enroll_date = cast(datetime.date, enroll_date)

    print(
        f"\nYou are about to enroll {student.full_name} in {course.title} "
        f"on {formatters.format_date_long(enroll_date)}."
    )

    if not helpers.confirm_action("Would you like to continue?"):
        helpers.returning_without_changes()
        return

    display_outcome(services.enrollments.enroll(student.id, course.id, enroll_date))


# === grades ===


def assign_grade(services: ServiceRegistry) -> None:
    enrollment = select_enrollment(services)

    if enrollment is MenuSignal.CANCEL:
        return
    enrollment = cast(Enrollment, enrollment)

    grade = helpers.prompt_float_or_cancel("Enter grade 0-10 (leave blank to cancel):")

    if grade is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    display_outcome(
        services.enrollments.assign_grade(
            enrollment.student_id, enrollment.course_id, grade
        )
    )


def update_grade(services: ServiceRegistry) -> None:
    enrollment = select_enrollment(services)

    if enrollment is MenuSignal.CANCEL:
        return
    enrollment = cast(Enrollment, enrollment)

    print(f"\nCurrent grade: {formatters.format_grade(enrollment.grade)}")

    grade = helpers.prompt_float_or_cancel(
        "Enter the new grade 0-10 (leave blank to cancel):"
    )

    if grade is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    display_outcome(
        services.enrollments.update_grade(
            enrollment.student_id, enrollment.course_id, grade
        )
    )


def finalize_grade(services: ServiceRegistry) -> None:
    enrollment = select_enrollment(services)

    if enrollment is MenuSignal.CANCEL:
        return
    enrollment = cast(Enrollment, enrollment)

    helpers.caution_banner()
    print(
        f"Finalizing locks the grade {formatters.format_grade(enrollment.grade)}. "
        "It can never be changed afterwards."
    )

    if not helpers.confirm_action("Would you like to finalize this grade?"):
        helpers.returning_without_changes()
        return

    display_outcome(
        services.enrollments.finalize_grade(
            enrollment.student_id, enrollment.course_id
        )
    )


# === view enrollments ===


def view_enrollments(services: ServiceRegistry) -> None:
    helpers.display_listing(
        services.enrollments.get_all(),
        "enrollments",
        model_formatters.format_enrollment_oneline,
        lambda e: e.key,
    )


def view_student_enrollments(services: ServiceRegistry) -> None:
    student = helpers.find_student_from_list(services)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    helpers.display_listing(
        services.enrollments.get_for_student(student.id),
        f"enrollments of {student.full_name}",
        model_formatters.format_enrollment_oneline,
        lambda e: e.course_id,
    )


# === helper methods ===


def select_enrollment(services: ServiceRegistry) -> Enrollment | MenuSignal:
    student = helpers.find_student_from_list(services)

    if student is MenuSignal.CANCEL:
        return MenuSignal.CANCEL

    return helpers.find_enrollment_for_student(services, cast(Student, student))


def display_outcome(response: Response) -> None:
    if not response.success:
        helpers.display_response_failure(response)

    else:
        print(f"\n{response.message}")
