"""Consolidated Validation Utilities - Single Source of Truth"""
from datetime import date
from typing import Any
from student_marks.exceptions.exceptions import ValidationError
from student_marks.models.student import Mark, Student
from student_marks.utils.security.security_utils import sanitize_string_input, validate_student_id

class ValidationUtils:
    """Unified validation utilities for service arguments"""

    @staticmethod
    def validate_integer(value: Any, field_name: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{field_name} must be an integer")
        return value

    @staticmethod
    def validate_positive_integer(value: Any, field_name: str) -> int:
        """Validate positive integer"""
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValidationError(f"{field_name} must be a positive integer")
        return value

    @staticmethod
    def validate_non_empty_string(value: Any, field_name: str) -> str:
        """Validate non-empty string"""
        # checked on the stripped text, stored and queried exactly as given
        if not sanitize_string_input(value, field_name):
            raise ValidationError(f"{field_name} must be a non-empty string")
        return value

    @staticmethod
    def validate_date(value: Any, field_name: str) -> date:
        if not isinstance(value, date):
            raise ValidationError(f"{field_name} must be a date")
        return value

    @staticmethod
    def validate_student(student: Any) -> Student:
        if not isinstance(student, Student):
            raise ValidationError("Student record is required")
        validate_student_id(student.id)
        ValidationUtils.validate_non_empty_string(student.name, "name")
        ValidationUtils.validate_non_empty_string(student.phone, "phone")
        return student

    @staticmethod
    def validate_mark(mark: Any) -> Mark:
        if not isinstance(mark, Mark):
            raise ValidationError("Mark record is required")
        ValidationUtils.validate_non_empty_string(mark.subject, "subject")
        ValidationUtils.validate_date(mark.date, "date")
        ValidationUtils.validate_integer(mark.score, "score")
        return mark
