# cli/menus/students_menu.py

"""
Manage Students menu for the Course Management CLI.

This module defines the interface for managing `Student` records, including:
- Adding new students to a department
- Editing student attributes (name, code, email, date of birth, status)
- Permanently removing students without enrollments
- Viewing all students

All operations are routed through `StudentService` for validation and persistence.
"""

import datetime
from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.department import Department
from models.student import Student
from services.registry import ServiceRegistry


def run(services: ServiceRegistry) -> None:
    title = formatters.format_banner_text("Manage Students")
    options = [
        ("Add Student", add_student),
        ("Edit Student", edit_student),
        ("Remove Student", delete_student),
        ("View Students", view_students),
    ]
    zero_option = "Return to Main menu"

    helpers.run_menu(title, options, zero_option, services)

    helpers.returning_to("Main menu")


# === add student ===


def add_student(services: ServiceRegistry) -> None:
    """
    Prompts for a new `Student`, previews it, and submits it to `StudentService`.

    Notes:
        - Blank name input cancels; code, email, and date of birth are optional here
          and the service decides whether what was entered is acceptable.
    """
    department = helpers.find_department_from_list(services)

    if department is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    department = cast(Department, department)

    full_name = helpers.prompt_user_input_or_cancel(
        "Enter full name (leave blank to cancel):"
    )

    if full_name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    code = helpers.prompt_user_input_or_none(
        "Enter student code (leave blank to skip):"
    )
    email = helpers.prompt_user_input_or_none(
        "Enter email address (leave blank to skip):"
    )
    date_of_birth = helpers.prompt_date_or_default(
        "Enter date of birth as YYYY-MM-DD (leave blank to skip):"
    )

    new_student = Student(
        id=None,
        code=code,
        full_name=cast(str, full_name),
        email=email,
        department_id=department.id,
        date_of_birth=(
            None
            if date_of_birth is MenuSignal.DEFAULT
            else cast(datetime.date, date_of_birth)
        ),
    )

    print("\nYou are about to create the following student:")
    print(model_formatters.format_student_multiline(new_student))

    if not helpers.confirm_action("Would you like to create this student?"):
        print(f"\nDiscarding student: {new_student.full_name}")
        return

    response = services.students.create(new_student)

    if not response.success:
        helpers.display_response_failure(response)
        print(f"\n{new_student.full_name} was not added.")

    else:
        print(f"\n{response.message}")


# === edit student ===


def edit_student(services: ServiceRegistry) -> None:
    student = helpers.find_student_from_list(services)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    print(model_formatters.format_student_multiline(student))

    new_name = helpers.prompt_user_input_or_default(
        "Enter a new full name (leave blank to keep the current name):"
    )

    if new_name is not MenuSignal.DEFAULT:
        student.full_name = cast(str, new_name)

    new_code = helpers.prompt_user_input_or_default(
        "Enter a new student code (leave blank to keep the current code):"
    )

    if new_code is not MenuSignal.DEFAULT:
        student.code = cast(str, new_code)

    new_email = helpers.prompt_user_input_or_default(
        "Enter a new email address (leave blank to keep the current email):"
    )

    if new_email is not MenuSignal.DEFAULT:
        try:
            student.email = cast(str, new_email)

        except ValueError as e:
            print(f"\n[ERROR] {e}")
            helpers.returning_without_changes()
            return

    new_dob = helpers.prompt_date_or_default(
        "Enter a new date of birth as YYYY-MM-DD (leave blank to keep the current date):"
    )

    if new_dob is not MenuSignal.DEFAULT:
        student.date_of_birth = cast(datetime.date, new_dob)

    if helpers.confirm_action(
        f"The student is currently {student.status}. Would you like to change it?"
    ):
        student.toggle_active_status()

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    response = services.students.update(student)

    if not response.success:
        helpers.display_response_failure(response)
        print("\nStudent was not updated.")

    else:
        print(f"\n{response.message}")


# === remove student ===


def delete_student(services: ServiceRegistry) -> None:
    student = helpers.find_student_from_list(services)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    helpers.caution_banner()
    print(f"You are about to permanently delete {student.full_name}.")

    if not helpers.confirm_action("Would you like to delete this student?"):
        helpers.returning_without_changes()
        return

    response = services.students.delete(student.id)

    if not response.success:
        helpers.display_response_failure(response)
        print(f"\n{student.full_name} was not removed.")

    else:
        print(f"\n{response.message}")


# === view students ===


def view_students(services: ServiceRegistry) -> None:
    helpers.display_listing(
        services.students.get_all(),
        "students",
        model_formatters.format_student_oneline,
        lambda s: (s.full_name or "").lower(),
    )
