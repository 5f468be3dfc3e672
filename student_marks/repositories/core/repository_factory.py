"""Repository Factory - DRY Implementation"""
from typing import Dict
from student_marks.db import get_collection
from student_marks.repositories.student.student_repo import StudentRepo

class RepositoryFactory:
    """Centralized repository creation (DRY principle)"""

    _student_repos: Dict[str, StudentRepo] = {}

    @classmethod
    def get_student_repo(cls, collection_name: str = 'student_collection') -> StudentRepo:
        """Get student repository instance with caching"""
        if collection_name not in cls._student_repos:
            cls._student_repos[collection_name] = StudentRepo(get_collection(collection_name))
        return cls._student_repos[collection_name]
