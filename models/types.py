# models/types.py

"""
Holds TypeVar definition for simplifying type checks.
"""

from typing import TypeVar

from .course import Course
from .department import Department
from .enrollment import Enrollment
from .student import Student

RecordType = TypeVar("RecordType", Department, Course, Student, Enrollment)
