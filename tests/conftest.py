"""Pytest configuration and fixtures."""

from datetime import date
from unittest.mock import MagicMock

import mongomock
import pytest

from student_marks.models.student import Mark, Student
from student_marks.repositories.student.student_repo import StudentRepo
from student_marks.services.student.students_service import StudentsService
from student_marks.utils.index.optimizer import ensure_indexes


STUDENTS = [
    Student(1, "Alice", "050-1111111"),
    Student(2, "Bob", "050-2222222"),
    Student(3, "Carol", "052-3333333"),
    Student(4, "Dave", "053-4444444"),
    Student(5, "Eve", "050-5555555"),
]

MARKS = {
    1: [
        Mark("Math", date(2024, 1, 10), 70),
        Mark("Math", date(2024, 1, 15), 90),
        Mark("Physics", date(2024, 1, 20), 85),
    ],
    2: [
        Mark("Math", date(2024, 1, 10), 60),
        Mark("Math", date(2024, 1, 11), 90),
    ],
    3: [
        Mark("Physics", date(2024, 2, 1), 95),
        Mark("Physics", date(2024, 2, 2), 88),
        Mark("Chemistry", date(2024, 2, 3), 81),
    ],
    4: [],
    5: [
        Mark("Math", date(2024, 3, 1), 40),
    ],
}


@pytest.fixture
def collection():
    """Create a fresh in-memory students collection with production indexes."""
    client = mongomock.MongoClient()
    coll = client["students_test"]["students"]
    ensure_indexes(coll)
    yield coll
    client.close()


@pytest.fixture
def repo(collection):
    return StudentRepo(collection)


@pytest.fixture
def service(repo):
    return StudentsService(repo)


@pytest.fixture
def seeded_service(service):
    """Service over a collection holding STUDENTS with their MARKS."""
    for student in STUDENTS:
        service.add_student(student)
        for mark in MARKS[student.id]:
            service.add_mark(student.id, mark)
    return service


@pytest.fixture
def mock_repo():
    """Repository double for verifying which store calls a service makes."""
    return MagicMock(spec=StudentRepo)


@pytest.fixture
def mocked_service(mock_repo):
    return StudentsService(mock_repo)
