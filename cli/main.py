# cli/main.py

"""
Main menu for the Course Management CLI.

Reads settings, configures logging, opens the configured store, and hands the
service registry to each submenu.
"""

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import courses_menu, departments_menu, enrollments_menu, students_menu
from core.config import get_settings
from core.logging_config import get_logger, setup_logging
from services.registry import ServiceRegistry
from store.base import StoreError
from store.factory import create_store

logger = get_logger(__name__)


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - If the store cannot be opened, the error is printed and the program exits.
        - The store is closed on every exit path.
    """
    settings = get_settings()
    setup_logging(settings)

    try:
        store = create_store(settings)

    except StoreError as e:
        logger.error("store_open_failed", backend=settings.store_backend, error=str(e))
        print(f"\n[ERROR] Could not open the {settings.store_backend} store: {e}")
        raise SystemExit(1) from None

    services = ServiceRegistry.from_store(store)

    title = formatters.format_banner_text("COURSE MANAGEMENT")
    options = [
        ("Manage Departments", departments_menu.run),
        ("Manage Students", students_menu.run),
        ("Manage Courses", courses_menu.run),
        ("Enrollments & Grades", enrollments_menu.run),
    ]
    zero_option = "Exit Program"

    try:
        while True:
            menu_response = helpers.display_menu(title, options, zero_option)

            if menu_response is MenuSignal.EXIT:
                exit_program()

            elif callable(menu_response):
                menu_response(services)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    finally:
        store.close()


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
