# cli/menus/departments_menu.py

"""
Manage Departments menu for the Course Management CLI.

Supports adding, renaming, deleting, and listing departments. Every change is
routed through `DepartmentService`, which validates and saves it immediately.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.department import Department
from services.registry import ServiceRegistry


def run(services: ServiceRegistry) -> None:
    title = formatters.format_banner_text("Manage Departments")
    options = [
        ("Add Department", add_department),
        ("Edit Department", edit_department),
        ("Delete Department", delete_department),
        ("View Departments", view_departments),
    ]
    zero_option = "Return to Main menu"

    helpers.run_menu(title, options, zero_option, services)

    helpers.returning_to("Main menu")


# === add department ===


def add_department(services: ServiceRegistry) -> None:
    name = helpers.prompt_user_input_or_cancel(
        "Enter department name (leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    name = cast(str, name)

    description = helpers.prompt_user_input_or_none(
        "Enter a description (leave blank to skip):"
    )

    new_department = Department(id=None, name=name, description=description)

    print("\nYou are about to create the following department:")
    print(model_formatters.format_department_multiline(new_department))

    if not helpers.confirm_action("Would you like to create this department?"):
        helpers.returning_without_changes()
        return

    response = services.departments.create(new_department)

    if not response.success:
        helpers.display_response_failure(response)
        print(f"\n{name} was not added.")

    else:
        print(f"\n{response.message}")


# === edit department ===


def edit_department(services: ServiceRegistry) -> None:
    department = helpers.find_department_from_list(services)

    if department is MenuSignal.CANCEL:
        return
    department = cast(Department, department)

    print(f"\nCurrent name: {department.name}")

    new_name = helpers.prompt_user_input_or_default(
        "Enter a new name (leave blank to keep the current name):"
    )

    if new_name is not MenuSignal.DEFAULT:
        department.name = cast(str, new_name)

    new_description = helpers.prompt_user_input_or_default(
        "Enter a new description (leave blank to keep the current description):"
    )

    if new_description is not MenuSignal.DEFAULT:
        department.description = cast(str, new_description)

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    response = services.departments.update(department)

    if not response.success:
        helpers.display_response_failure(response)
        print("\nDepartment was not updated.")

    else:
        print(f"\n{response.message}")


# === delete department ===


def delete_department(services: ServiceRegistry) -> None:
    department = helpers.find_department_from_list(services)

    if department is MenuSignal.CANCEL:
        return
    department = cast(Department, department)

    helpers.caution_banner()
    print(f"You are about to permanently delete {department.name}.")

    if not helpers.confirm_action("Would you like to delete this department?"):
        helpers.returning_without_changes()
        return

    response = services.departments.delete(department.id)

    if not response.success:
        helpers.display_response_failure(response)
        print(f"\n{department.name} was not deleted.")

    else:
        print(f"\n{response.message}")


# === view departments ===


def view_departments(services: ServiceRegistry) -> None:
    helpers.display_listing(
        services.departments.get_all(),
        "departments",
        model_formatters.format_department_oneline,
        lambda d: d.name.lower(),
    )
