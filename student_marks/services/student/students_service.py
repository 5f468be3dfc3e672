"""Students Service - Business Logic Layer (SoC)"""
import logging
from datetime import date
from typing import List, Optional
from student_marks.config.settings import BEST_STUDENT_SCORE_THRESHOLD
from student_marks.exceptions.exceptions import StudentNotFoundError, StudentAlreadyExistsError
from student_marks.models.student import (
    Mark, NameAvgScore, Student, marks_from_documents, students_from_documents
)
from student_marks.repositories.core.repository_factory import RepositoryFactory
from student_marks.repositories.student.student_repo import StudentRepo
from student_marks.repositories.student.student_pipelines import (
    build_subject_marks_pipeline, build_marks_at_dates_pipeline, build_avg_score_greater_pipeline,
    build_best_students_pipeline, build_worst_students_pipeline
)
from student_marks.services.report.ranking_formatter import RankingFormatter
from student_marks.utils.security.security_utils import validate_student_id
from student_marks.utils.time.date_utils import day_range
from student_marks.utils.validation import ValidationUtils

logger = logging.getLogger(__name__)

class StudentsService:
    def __init__(self, student_repo: Optional[StudentRepo] = None):
        self.student_repo = student_repo if student_repo is not None else RepositoryFactory.get_student_repo()
        self.formatter = RankingFormatter()

    def _ensure_exists(self, student_id: int) -> None:
        if not self.student_repo.exists_by_id(student_id):
            raise StudentNotFoundError(f"Student {student_id} not found")

    # ═══════════════════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════════════════

    def add_student(self, student: Student) -> Student:
        student = ValidationUtils.validate_student(student)
        if not self.student_repo.insert_if_absent(student.to_document()):
            raise StudentAlreadyExistsError(f"Student {student.id} already exists")
        logger.debug(f"saved {student}")
        return student

    def update_phone(self, student_id: int, phone: str) -> Student:
        student_id = validate_student_id(student_id)
        phone = ValidationUtils.validate_non_empty_string(phone, "phone")
        previous = self.student_repo.set_phone(student_id, phone)
        if previous is None:
            raise StudentNotFoundError(f"Student {student_id} not found")
        logger.debug(f"student {student_id}, old phone number {previous.get('phone')}, new phone number {phone}")
        return Student(id=student_id, name=previous.get("name"), phone=phone)

    def add_mark(self, student_id: int, mark: Mark) -> List[Mark]:
        student_id = validate_student_id(student_id)
        mark = ValidationUtils.validate_mark(mark)
        updated = self.student_repo.push_mark(student_id, mark.to_document())
        if updated is None:
            raise StudentNotFoundError(f"Student {student_id} not found")
        logger.debug(f"student {student_id}, added mark {mark}")
        return marks_from_documents(updated.get("marks"))

    def remove_student(self, student_id: int) -> Student:
        student_id = validate_student_id(student_id)
        removed = self.student_repo.delete(student_id)
        if removed is None:
            raise StudentNotFoundError(f"Student {student_id} not found")
        logger.debug(f"removed student {student_id}")
        return Student.from_document(removed)

    # ═══════════════════════════════════════════════════════════════════════
    # SINGLE STUDENT READS
    # ═══════════════════════════════════════════════════════════════════════

    def get_marks(self, student_id: int) -> List[Mark]:
        student_id = validate_student_id(student_id)
        doc = self.student_repo.find_student_marks(student_id)
        if doc is None:
            raise StudentNotFoundError(f"Student {student_id} not found")
        return marks_from_documents(doc.get("marks"))

    def get_student_by_phone(self, phone: str) -> Optional[Student]:
        phone = ValidationUtils.validate_non_empty_string(phone, "phone")
        doc = self.student_repo.find_by_phone(phone)
        if doc is None:
            return None
        return Student(id=doc["id"], name=doc.get("name"), phone=phone)

    def get_student_subject_marks(self, student_id: int, subject: str) -> List[Mark]:
        student_id = validate_student_id(student_id)
        subject = ValidationUtils.validate_non_empty_string(subject, "subject")
        self._ensure_exists(student_id)
        docs = self.student_repo.aggregate(build_subject_marks_pipeline(student_id, subject))
        return marks_from_documents(docs)

    def get_student_marks_at_dates(self, student_id: int, date_from: date, date_to: date) -> List[Mark]:
        """Marks dated from date_from through date_to, both days included"""
        student_id = validate_student_id(student_id)
        ValidationUtils.validate_date(date_from, "from")
        ValidationUtils.validate_date(date_to, "to")
        self._ensure_exists(student_id)
        start, end = day_range(date_from, date_to)
        docs = self.student_repo.aggregate(build_marks_at_dates_pipeline(student_id, start, end))
        return marks_from_documents(docs)

    # ═══════════════════════════════════════════════════════════════════════
    # STUDENT PREDICATE QUERIES
    # ═══════════════════════════════════════════════════════════════════════

    def get_students_by_phone_prefix(self, prefix: str) -> List[Student]:
        prefix = ValidationUtils.validate_non_empty_string(prefix, "phone prefix")
        students = students_from_documents(self.student_repo.find_by_phone_prefix(prefix))
        logger.debug(f"number of the students having phone prefix {prefix} is {len(students)}")
        return students

    def get_students_all_good_marks(self, threshold: int) -> List[Student]:
        threshold = ValidationUtils.validate_integer(threshold, "threshold")
        return students_from_documents(self.student_repo.find_all_good_marks(threshold))

    def get_students_few_marks(self, amount: int) -> List[Student]:
        amount = ValidationUtils.validate_integer(amount, "amount")
        return students_from_documents(self.student_repo.find_few_marks(amount))

    def get_students_all_good_marks_subject(self, subject: str, threshold: int) -> List[Student]:
        subject = ValidationUtils.validate_non_empty_string(subject, "subject")
        threshold = ValidationUtils.validate_integer(threshold, "threshold")
        return students_from_documents(self.student_repo.find_all_good_marks_subject(subject, threshold))

    def get_students_marks_amount_between(self, min_amount: int, max_amount: int) -> List[Student]:
        min_amount = ValidationUtils.validate_integer(min_amount, "min")
        max_amount = ValidationUtils.validate_integer(max_amount, "max")
        return students_from_documents(self.student_repo.find_marks_amount_between(min_amount, max_amount))

    # ═══════════════════════════════════════════════════════════════════════
    # CLASS RANKINGS
    # ═══════════════════════════════════════════════════════════════════════

    def get_student_avg_score_greater(self, threshold: int) -> List[NameAvgScore]:
        threshold = ValidationUtils.validate_integer(threshold, "threshold")
        results = self.student_repo.aggregate(build_avg_score_greater_pipeline(threshold))
        logger.debug(f"students with average score above {threshold}: {len(results)}")
        return self.formatter.format_avg_scores(results)

    def get_best_students(self, n_students: int) -> List[str]:
        n_students = ValidationUtils.validate_positive_integer(n_students, "number of students")
        results = self.student_repo.aggregate(
            build_best_students_pipeline(n_students, BEST_STUDENT_SCORE_THRESHOLD)
        )
        return self.formatter.format_best_students(results)

    def get_worst_students(self, n_students: int) -> List[str]:
        n_students = ValidationUtils.validate_positive_integer(n_students, "number of students")
        results = self.student_repo.aggregate(build_worst_students_pipeline(n_students))
        return self.formatter.format_worst_students(results)
