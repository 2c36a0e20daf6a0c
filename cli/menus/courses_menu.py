# cli/menus/courses_menu.py

"""
Manage Courses menu for the Course Management CLI.

Supports adding, editing, deleting, and listing courses. Credit counts and
department ids are parsed here; every business rule is enforced by `CourseService`.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.course import Course
from models.department import Department
from services.registry import ServiceRegistry


def run(services: ServiceRegistry) -> None:
    title = formatters.format_banner_text("Manage Courses")
    options = [
        ("Add Course", add_course),
        ("Edit Course", edit_course),
        ("Delete Course", delete_course),
        ("View Courses", view_courses),
    ]
    zero_option = "Return to Main menu"

    helpers.run_menu(title, options, zero_option, services)

    helpers.returning_to("Main menu")


# === add course ===


def add_course(services: ServiceRegistry) -> None:
    department = helpers.find_department_from_list(services)

    if department is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    department = cast(Department, department)

    title = helpers.prompt_user_input_or_cancel(
        "Enter course title (leave blank to cancel):"
    )

    if title is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    code = helpers.prompt_user_input_or_none(
        "Enter course code, e.g. CS101 (leave blank to skip):"
    )

    credits = helpers.prompt_int_or_cancel("Enter credits (leave blank to cancel):")

    if credits is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    new_course = Course(
        id=None,
        code=code,
        title=cast(str, title),
        credits=cast(int, credits),
        department_id=department.id,
    )

    print("\nYou are about to create the following course:")
    print(model_formatters.format_course_multiline(new_course))

    if not helpers.confirm_action("Would you like to create this course?"):
        helpers.returning_without_changes()
        return

    response = services.courses.create(new_course)

    if not response.success:
        helpers.display_response_failure(response)
        print(f"\n{new_course.title} was not added.")

    else:
        print(f"\n{response.message}")


# === edit course ===


def edit_course(services: ServiceRegistry) -> None:
    course = helpers.find_course_from_list(services)

    if course is MenuSignal.CANCEL:
        return
    course = cast(Course, course)

    print(model_formatters.format_course_multiline(course))

    new_title = helpers.prompt_user_input_or_default(
        "Enter a new title (leave blank to keep the current title):"
    )

    if new_title is not MenuSignal.DEFAULT:
        course.title = cast(str, new_title)

    new_code = helpers.prompt_user_input_or_default(
        "Enter a new code (leave blank to keep the current code):"
    )

    if new_code is not MenuSignal.DEFAULT:
        course.code = cast(str, new_code)

    new_credits = helpers.prompt_int_or_cancel(
        "Enter new credits (leave blank to keep the current credits):"
    )

    if new_credits is not MenuSignal.CANCEL:
        course.credits = cast(int, new_credits)

    if helpers.confirm_action("Would you like to deactivate or archive this course?"):
        course.is_active = not helpers.confirm_action("Deactivate the course?")
        course.is_archived = helpers.confirm_action("Archive the course?")

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    response = services.courses.update(course)

    if not response.success:
        helpers.display_response_failure(response)
        print("\nCourse was not updated.")

    else:
        print(f"\n{response.message}")


# === delete course ===


def delete_course(services: ServiceRegistry) -> None:
    course = helpers.find_course_from_list(services)

    if course is MenuSignal.CANCEL:
        return
    course = cast(Course, course)

    helpers.caution_banner()
    print(f"You are about to permanently delete {course.title}.")

    if not helpers.confirm_action("Would you like to delete this course?"):
        helpers.returning_without_changes()
        return

    response = services.courses.delete(course.id)

    if not response.success:
        helpers.display_response_failure(response)
        print(f"\n{course.title} was not deleted.")

    else:
        print(f"\n{response.message}")


# === view courses ===


def view_courses(services: ServiceRegistry) -> None:
    helpers.display_listing(
        services.courses.get_all(),
        "courses",
        model_formatters.format_course_oneline,
        lambda c: (c.code or "", c.id),
    )
