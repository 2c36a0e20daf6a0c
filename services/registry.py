# services/registry.py

"""
Bundles the four record services over one shared store and one shared write
lock, so a write through any service never interleaves with another.
"""

import datetime
import threading
from typing import Callable, NamedTuple

from services.course_service import CourseService
from services.department_service import DepartmentService
from services.enrollment_service import EnrollmentService
from services.student_service import StudentService
from store.base import EntityStore


class ServiceRegistry(NamedTuple):
    store: EntityStore
    departments: DepartmentService
    courses: CourseService
    students: StudentService
    enrollments: EnrollmentService

    @classmethod
    def from_store(
        cls,
        store: EntityStore,
        today: Callable[[], datetime.date] = datetime.date.today,
    ) -> "ServiceRegistry":
        lock = threading.RLock()

        return cls(
            store=store,
            departments=DepartmentService(store, lock),
            courses=CourseService(store, lock),
            students=StudentService(store, lock),
            enrollments=EnrollmentService(store, today=today, lock=lock),
        )
