# core/formatters.py

# all pure utilities & date helpers
# must never import from models!

import datetime
from typing import Any

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_optional(value: Any, placeholder: str = "[NONE]") -> str:
    return placeholder if value is None or value == "" else str(value)


# === date formatters ===


def format_date(value: datetime.date | None) -> str:
    return value.strftime("%Y-%m-%d") if value else "[NO DATE]"


def format_date_long(value: datetime.date) -> str:
    return f"{value.strftime('%A, %B %d, %Y')}"


def parse_date(text: str) -> datetime.date:
    """
    Parses a YYYY-MM-DD string into a date.

    Raises:
        ValueError: If the text is not an ISO calendar date.
    """
    return datetime.date.fromisoformat(text.strip())


# === grade formatters ===


def format_grade(grade: float | None) -> str:
    return f"{grade:.2f}" if grade is not None else "[UNGRADED]"
