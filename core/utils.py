# core/utils.py

"""
Repository for program-wide utilities.

Pure helpers only: nothing here touches the store or the record classes.
"""

import datetime


def normalize(text: str | None) -> str:
    return text.strip().lower() if text else ""


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def as_date(value: datetime.date | datetime.datetime) -> datetime.date:
    """
    Reduces a datetime to its calendar date; dates pass through unchanged.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def age_at(date_of_birth: datetime.date, at_date: datetime.date) -> int:
    """
    Computes a person's age in whole years on a given date.

    Args:
        date_of_birth (datetime.date): The birth date.
        at_date (datetime.date): The date the age is measured on.

    Returns:
        The difference in calendar years, minus one if the birthday has not yet
        occurred in `at_date`'s year. Someone born on Feb 29 turns a year older
        on Mar 1 in non-leap years.
    """
    age = at_date.year - date_of_birth.year

    if (at_date.month, at_date.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1

    return age


def days_between(start: datetime.date, end: datetime.date) -> int:
    return (end - start).days
