"""Custom exceptions - SoC principle"""

class StudentsError(Exception):
    """Base exception for the student marks service"""
    pass

class ValidationError(StudentsError):
    """Input validation error"""
    pass

class StudentNotFoundError(StudentsError):
    """Referenced student id does not exist"""
    pass

class StudentAlreadyExistsError(StudentsError):
    """Student with the same id is already registered"""
    pass
