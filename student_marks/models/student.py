"""Student domain records and MongoDB document mapping"""
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional
from student_marks.utils.time.date_utils import date_to_datetime, to_date


@dataclass(frozen=True)
class Student:
    """Public view of a student (marks are never part of it)"""
    id: int
    name: str
    phone: str

    @classmethod
    def from_document(cls, doc: Dict) -> "Student":
        return cls(id=doc["id"], name=doc.get("name"), phone=doc.get("phone"))

    def to_document(self) -> Dict:
        """New StudentDocument with an empty marks list"""
        return {"id": self.id, "name": self.name, "phone": self.phone, "marks": []}


@dataclass(frozen=True)
class Mark:
    subject: str
    date: date
    score: int

    @classmethod
    def from_document(cls, doc: Dict) -> "Mark":
        return cls(subject=doc.get("subject"), date=to_date(doc.get("date")), score=doc.get("score"))

    def to_document(self) -> Dict:
        # BSON has no date-only type
        return {"subject": self.subject, "date": date_to_datetime(self.date), "score": self.score}


@dataclass(frozen=True)
class NameAvgScore:
    name: str
    avg_score: int


def students_from_documents(docs: List[Dict]) -> List[Student]:
    return [Student.from_document(doc) for doc in docs]


def marks_from_documents(docs: Optional[List[Dict]]) -> List[Mark]:
    return [Mark.from_document(doc) for doc in docs or []]
