# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Course Management application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and parsing user input
- Selecting departments, courses, students, and enrollments from the store
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

import datetime
from enum import Enum
from typing import Any, Callable, Iterable

import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.response import Response
from models.course import Course
from models.department import Department
from models.enrollment import Enrollment
from models.student import Student
from models.types import RecordType
from services.registry import ServiceRegistry


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("\nSelect an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # menu labels are 1-indexed
            return options[int(choice) - 1][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def run_menu(
    title: str,
    options: list[tuple[str, Callable[[ServiceRegistry], None]]],
    zero_option: str,
    services: ServiceRegistry,
) -> None:
    """
    Dispatch loop shared by every submenu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    while True:
        menu_response = display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(services)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_listing(
    response: Response,
    description: str,
    formatter: Callable[[Any], str],
    sort_key: Callable[[Any], Any],
) -> None:
    """
    Prints the records of a successful listing `Response`, or its failure.
    """
    if not response.success:
        display_response_failure(response)
        return

    records = response.data["records"]

    if not records:
        print(f"\nThere are no {description}.")
        return

    print(f"\n{formatters.format_banner_text(description.title())}")
    display_results(sorted(records, key=sort_key), False, formatter)


# === user input helpers ===

# ---
# Simple prompt and confirmation helpers:
#
# - `prompt_user_input()` strips whitespace from user input.
# - Blank inputs are handled as follows:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL`.
#     - `prompt_user_input_or_default()` returns `MenuSignal.DEFAULT`.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.
# ---


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_make_change() -> bool:
    return confirm_action("Do you want to make this change?")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.DEFAULT if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_int_or_cancel(prompt: str) -> int | MenuSignal:
    """
    Loops until the user enters a whole number or leaves the input blank to cancel.
    """
    while True:
        response = prompt_user_input_or_cancel(prompt)

        if isinstance(response, MenuSignal):
            return response

        try:
            return int(response)

        except ValueError:
            print("\nInvalid input. Please enter a whole number.")


def prompt_float_or_cancel(prompt: str) -> float | MenuSignal:
    while True:
        response = prompt_user_input_or_cancel(prompt)

        if isinstance(response, MenuSignal):
            return response

        try:
            return float(response)

        except ValueError:
            print("\nInvalid input. Please enter a number.")


def prompt_date_or_default(prompt: str) -> datetime.date | MenuSignal:
    """
    Loops until the user enters a YYYY-MM-DD date, or leaves it blank to accept the default.
    """
    while True:
        response = prompt_user_input_or_default(prompt)

        if isinstance(response, MenuSignal):
            return response

        try:
            return formatters.parse_date(response)

        except ValueError:
            print("\nInvalid date. Please use the format YYYY-MM-DD.")


# === finder and select methods ===


def prompt_selection_from_list(
    list_data: list[RecordType],
    list_description: str,
    sort_key: Callable[[RecordType], Any] = lambda x: x,
    formatter: Callable[[RecordType], str] = lambda x: str(x),
) -> RecordType | None:
    """
    Prompts the user to select an item from a list of records.

    Args:
        list_data (list[RecordType]): The records to choose from.
        list_description (str): A short description used in prompts and headings (e.g. "students").
        sort_key (Callable[[RecordType], Any], optional): Sort function for ordering the list. Defaults to identity.
        formatter (Callable[[RecordType], str], optional): Function to convert each record to a display string. Defaults to str().

    Returns:
        RecordType: The selected record if a valid index is chosen.
        None: If the list is empty or the user cancels with "0".
    """
    if not list_data:
        print(f"\nThere are no {list_description.lower()}.")
        return

    sorted_list = sorted(list_data, key=sort_key)

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(sorted_list, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return

        try:
            index = int(choice) - 1
            return sorted_list[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def _select_from_response(
    response: Response,
    list_description: str,
    sort_key: Callable[[Any], Any],
    formatter: Callable[[Any], str],
) -> Any:
    if not response.success:
        display_response_failure(response)
        return MenuSignal.CANCEL

    record = prompt_selection_from_list(
        response.data["records"], list_description, sort_key, formatter
    )

    return MenuSignal.CANCEL if record is None else record


def find_department_from_list(services: ServiceRegistry) -> Department | MenuSignal:
    return _select_from_response(
        services.departments.get_all(),
        "Departments",
        lambda d: d.name.lower(),
        model_formatters.format_department_oneline,
    )


def find_course_from_list(services: ServiceRegistry) -> Course | MenuSignal:
    return _select_from_response(
        services.courses.get_all(),
        "Courses",
        lambda c: (c.code or "", c.id),
        model_formatters.format_course_oneline,
    )


def find_student_from_list(services: ServiceRegistry) -> Student | MenuSignal:
    return _select_from_response(
        services.students.get_all(),
        "Students",
        lambda s: (s.full_name or "").lower(),
        model_formatters.format_student_oneline,
    )


def find_enrollment_for_student(
    services: ServiceRegistry, student: Student
) -> Enrollment | MenuSignal:
    return _select_from_response(
        services.enrollments.get_for_student(student.id),
        f"Enrollments of {student.full_name}",
        lambda e: e.course_id,
        model_formatters.format_enrollment_oneline,
    )


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def caution_banner() -> None:
    caution_banner = formatters.format_banner_text("CAUTION!")
    print(f"\n{caution_banner}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Error codes are printed by name.
    """
    if response.success:
        return

    error_label = response.error.name if response.error is not None else "ERROR"

    print(f"\n[ERROR: {error_label}] {response.message}")
