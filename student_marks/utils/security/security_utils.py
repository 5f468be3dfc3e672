"""Security utilities - DRY principle"""
import re
from typing import Any
from student_marks.exceptions.exceptions import ValidationError

def sanitize_string_input(value: Any, field_name: str = "Input") -> str:
    """Sanitize string input to prevent injection"""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be string")
    return value.strip()

def sanitize_regex_input(pattern: str) -> str:
    """Escape regex metacharacters"""
    return re.escape(str(pattern).strip())

def validate_student_id(student_id: Any) -> int:
    """Validate student ID format"""
    if isinstance(student_id, dict):
        raise ValidationError("Student ID cannot be dict (NoSQL injection attempt)")
    # bool is an int subclass
    if isinstance(student_id, bool) or not isinstance(student_id, int):
        raise ValidationError(f"Student ID must be an integer, got {student_id!r}")
    return student_id
