# tests/conftest.py

import datetime

import pytest

from models.course import Course
from models.department import Department
from models.student import Student
from services.registry import ServiceRegistry
from store.memory_store import InMemoryStore
from store.sql_store import SqlStore

TODAY = datetime.date(2025, 9, 1)


class FixedClock:
    def __init__(self, today: datetime.date):
        self.today = today

    def __call__(self) -> datetime.date:
        return self.today

    def advance(self, days: int) -> None:
        self.today += datetime.timedelta(days=days)


@pytest.fixture(params=["memory", "sql"])
def store(request):
    if request.param == "memory":
        store = InMemoryStore()
    else:
        store = SqlStore("sqlite://")

    yield store

    store.close()


@pytest.fixture
def clock():
    return FixedClock(TODAY)


@pytest.fixture
def services(store, clock):
    return ServiceRegistry.from_store(store, today=clock)


# === seeded records ===

# ---
# Seeded records are written straight through the store, the same way
# existing data would already be present, so they bypass service rules
# (the "IT" department name is shorter than a new department may be).
# ---


def add_record(repository, record, store):
    repository.add(record)
    store.save()
    return record


@pytest.fixture
def it_department(store):
    return add_record(store.departments, Department(None, "IT"), store)


@pytest.fixture
def math_department(store):
    return add_record(store.departments, Department(None, "Mathematics"), store)


@pytest.fixture
def sample_course(store, it_department):
    return add_record(
        store.courses,
        Course(None, "CS101", "Intro to Programming", 3, it_department.id),
        store,
    )


@pytest.fixture
def sample_student(store, it_department):
    return add_record(
        store.students,
        Student(
            None,
            "S001",
            "Alice Nguyen",
            "alice@example.edu",
            it_department.id,
            datetime.date(2000, 1, 15),
        ),
        store,
    )


@pytest.fixture
def make_course(store, it_department):
    def factory(code, credits=3, department_id=None, active=True, archived=False):
        return add_record(
            store.courses,
            Course(
                None,
                code,
                f"Course {code}",
                credits,
                department_id or it_department.id,
                active,
                archived,
            ),
            store,
        )

    return factory


@pytest.fixture
def make_student(store, it_department):
    def factory(
        code, date_of_birth=datetime.date(2000, 1, 15), active=True, department_id=None
    ):
        return add_record(
            store.students,
            Student(
                None,
                code,
                f"Student {code}",
                None,
                department_id or it_department.id,
                date_of_birth,
                active,
            ),
            store,
        )

    return factory


@pytest.fixture
def enrolled(services, sample_student, sample_course):
    response = services.enrollments.enroll(sample_student.id, sample_course.id, TODAY)
    assert response.success
    return response.data["record"]
