"""Student Repository - Data Access Layer (SoC)"""
from typing import Dict, List, Optional
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError
from student_marks.db import get_collection
from student_marks.repositories.student import student_filters as filters
from student_marks.repositories.student.student_filters import (
    ID_NAME_PROJECTION, STUDENT_VIEW_PROJECTION, MARKS_PROJECTION
)

class StudentRepo:
    def __init__(self, collection: Optional[Collection] = None):
        self.collection = collection if collection is not None else get_collection('student_collection')

    # ---------- single student reads ----------

    def exists_by_id(self, student_id: int) -> bool:
        return self.collection.find_one(filters.by_id(student_id), {"_id": 1}) is not None

    def find_student_marks(self, student_id: int) -> Optional[Dict]:
        return self.collection.find_one(filters.by_id(student_id), MARKS_PROJECTION)

    def find_student_no_marks(self, student_id: int) -> Optional[Dict]:
        return self.collection.find_one(filters.by_id(student_id), STUDENT_VIEW_PROJECTION)

    def find_by_phone(self, phone: str) -> Optional[Dict]:
        return self.collection.find_one(filters.by_phone(phone), ID_NAME_PROJECTION)

    # ---------- predicate queries ----------

    def _find_views(self, query: Dict) -> List[Dict]:
        return list(self.collection.find(query, STUDENT_VIEW_PROJECTION).sort("id", 1))

    def find_by_phone_prefix(self, prefix: str) -> List[Dict]:
        return self._find_views(filters.by_phone_prefix(prefix))

    def find_all_good_marks(self, threshold: int) -> List[Dict]:
        return self._find_views(filters.all_marks_above(threshold))

    def find_few_marks(self, amount: int) -> List[Dict]:
        return self._find_views(filters.fewer_marks_than(amount))

    def find_all_good_marks_subject(self, subject: str, threshold: int) -> List[Dict]:
        return self._find_views(filters.all_marks_in_subject_at_least(subject, threshold))

    def find_marks_amount_between(self, min_amount: int, max_amount: int) -> List[Dict]:
        return self._find_views(filters.marks_amount_between(min_amount, max_amount))

    # ---------- atomic writes ----------

    def insert_if_absent(self, document: Dict) -> bool:
        """Atomic insert keyed on id; an existing document is never touched"""
        fields = {k: v for k, v in document.items() if k != "id"}
        try:
            result = self.collection.update_one(
                filters.by_id(document["id"]),
                {"$setOnInsert": fields},
                upsert=True
            )
        except DuplicateKeyError:
            # concurrent insert of the same id won the unique index
            return False
        return result.upserted_id is not None

    def set_phone(self, student_id: int, phone: str) -> Optional[Dict]:
        """Replace phone, returning the student view as it was before the update"""
        return self.collection.find_one_and_update(
            filters.by_id(student_id),
            {"$set": {"phone": phone}},
            projection=STUDENT_VIEW_PROJECTION,
            return_document=ReturnDocument.BEFORE
        )

    def push_mark(self, student_id: int, mark: Dict) -> Optional[Dict]:
        """Append mark, returning the marks as they are after the update"""
        return self.collection.find_one_and_update(
            filters.by_id(student_id),
            {"$push": {"marks": mark}},
            projection=MARKS_PROJECTION,
            return_document=ReturnDocument.AFTER
        )

    def delete(self, student_id: int) -> Optional[Dict]:
        return self.collection.find_one_and_delete(
            filters.by_id(student_id),
            projection=STUDENT_VIEW_PROJECTION
        )

    # ---------- aggregation ----------

    def aggregate(self, pipeline: List[Dict]) -> List[Dict]:
        return list(self.collection.aggregate(pipeline))
