"""Student marks record-keeping service backed by MongoDB"""
from student_marks.models.student import Student, Mark, NameAvgScore
from student_marks.services.student.students_service import StudentsService
from student_marks.exceptions.exceptions import (
    StudentsError, ValidationError, StudentNotFoundError, StudentAlreadyExistsError
)
