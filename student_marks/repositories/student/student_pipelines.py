"""Student Domain Pipelines - Flow-Based Organization (SoC)"""
from datetime import datetime
from typing import List, Dict

# ═══════════════════════════════════════════════════════════════════════════════
# SINGLE STUDENT MARK PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

_MARK_FIELDS = {
    "_id": 0,
    "subject": "$marks.subject",
    "date": "$marks.date",
    "score": "$marks.score"
}

def build_subject_marks_pipeline(student_id: int, subject: str) -> List[Dict]:
    """Marks of one student in one subject, each mark matched independently"""
    return [
        {"$match": {"id": student_id}},
        {"$unwind": "$marks"},
        {"$match": {"marks.subject": subject}},
        {"$project": dict(_MARK_FIELDS)}
    ]

def build_marks_at_dates_pipeline(student_id: int, date_from: datetime, date_to_exclusive: datetime) -> List[Dict]:
    """Marks of one student dated in [date_from, date_to_exclusive)"""
    return [
        {"$match": {"id": student_id}},
        {"$unwind": "$marks"},
        {"$match": {"marks.date": {"$gte": date_from, "$lt": date_to_exclusive}}},
        {"$project": dict(_MARK_FIELDS)}
    ]

# ═══════════════════════════════════════════════════════════════════════════════
# CLASS RANKING PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_avg_score_greater_pipeline(threshold: int) -> List[Dict]:
    """Mean score per student name, kept when above threshold, best first"""
    return [
        {"$unwind": "$marks"},
        {"$group": {
            "_id": "$name",
            "avgScore": {"$avg": "$marks.score"}
        }},
        {"$match": {"avgScore": {"$gt": threshold}}},
        {"$sort": {"avgScore": -1, "_id": 1}},
        {"$project": {"_id": 0, "name": "$_id", "avgScore": 1}}
    ]

def build_best_students_pipeline(limit: int, score_threshold: int) -> List[Dict]:
    """Top students by count of marks above score_threshold"""
    return [
        {"$unwind": "$marks"},
        {"$match": {"marks.score": {"$gt": score_threshold}}},
        {"$group": {
            "_id": {"id": "$id", "name": "$name"},
            "count": {"$sum": 1}
        }},
        {"$project": {"_id": 0, "id": "$_id.id", "name": "$_id.name", "count": 1}},
        {"$sort": {"count": -1, "id": 1}},
        {"$limit": limit}
    ]

def build_worst_students_pipeline(limit: int) -> List[Dict]:
    """Bottom students by total score (students without marks are not ranked)"""
    return [
        {"$unwind": "$marks"},
        {"$group": {
            "_id": {"id": "$id", "name": "$name"},
            "totalScore": {"$sum": "$marks.score"}
        }},
        {"$project": {"_id": 0, "id": "$_id.id", "name": "$_id.name", "totalScore": 1}},
        {"$sort": {"totalScore": 1, "id": 1}},
        {"$limit": limit}
    ]
