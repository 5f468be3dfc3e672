"""Tests for filter documents and aggregation pipeline shapes."""

from datetime import datetime
from unittest.mock import MagicMock, call

import pytest

from student_marks.exceptions.exceptions import ValidationError
from student_marks.repositories.student import student_filters as filters
from student_marks.repositories.student.student_repo import StudentRepo
from student_marks.repositories.student.student_pipelines import (
    build_best_students_pipeline,
    build_marks_at_dates_pipeline,
    build_worst_students_pipeline,
)


def test_fewer_marks_than_filter():
    assert filters.fewer_marks_than(3) == {
        "$expr": {"$lt": [{"$size": {"$ifNull": ["$marks", []]}}, 3]}
    }


def test_marks_amount_between_filter_is_closed_range():
    size = {"$size": {"$ifNull": ["$marks", []]}}

    assert filters.marks_amount_between(2, 4) == {
        "$expr": {"$and": [{"$gte": [size, 2]}, {"$lte": [size, 4]}]}
    }


def test_phone_prefix_filter_escapes_metacharacters():
    assert filters.by_phone_prefix("+972.5") == {"phone": {"$regex": r"^\+972\.5"}}


def test_marks_at_dates_pipeline_is_closed_open():
    start, end = datetime(2024, 1, 1), datetime(2024, 1, 2)

    pipeline = build_marks_at_dates_pipeline(1, start, end)

    assert pipeline[2] == {"$match": {"marks.date": {"$gte": start, "$lt": end}}}


def test_best_students_pipeline_limits_last():
    pipeline = build_best_students_pipeline(5, 80)

    assert pipeline[1] == {"$match": {"marks.score": {"$gt": 80}}}
    assert pipeline[-2] == {"$sort": {"count": -1, "id": 1}}
    assert pipeline[-1] == {"$limit": 5}


def test_worst_students_pipeline_sorts_ascending():
    pipeline = build_worst_students_pipeline(3)

    assert pipeline[-2] == {"$sort": {"totalScore": 1, "id": 1}}
    assert pipeline[-1] == {"$limit": 3}


def test_few_marks_query_passes_filter_to_store(mocked_service, mock_repo):
    mock_repo.find_few_marks.return_value = [{"id": 4, "name": "Dave", "phone": "053-4444444"}]

    students = mocked_service.get_students_few_marks(2)

    mock_repo.find_few_marks.assert_called_once_with(2)
    assert [s.id for s in students] == [4]


def test_marks_amount_between_query(mocked_service, mock_repo):
    mock_repo.find_marks_amount_between.return_value = []

    assert mocked_service.get_students_marks_amount_between(2, 3) == []
    mock_repo.find_marks_amount_between.assert_called_once_with(2, 3)


def test_repo_uses_expr_filters():
    collection = MagicMock()
    repo = StudentRepo(collection)

    repo.find_few_marks(2)
    repo.find_marks_amount_between(1, 3)

    assert collection.find.call_args_list == [
        call(filters.fewer_marks_than(2), filters.STUDENT_VIEW_PROJECTION),
        call(filters.marks_amount_between(1, 3), filters.STUDENT_VIEW_PROJECTION),
    ]


def test_best_students_uses_configured_threshold(mocked_service, mock_repo):
    mock_repo.aggregate.return_value = [{"id": 1, "name": "Alice", "count": 2}]

    assert mocked_service.get_best_students(1) == ["ID: 1, Name: Alice, Count: 2"]
    mock_repo.aggregate.assert_called_once_with(build_best_students_pipeline(1, 80))


def test_non_positive_ranking_size_rejected(mocked_service, mock_repo):
    for n in (0, -1):
        with pytest.raises(ValidationError):
            mocked_service.get_worst_students(n)
    mock_repo.aggregate.assert_not_called()
