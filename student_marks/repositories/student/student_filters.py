"""Student Query Filters - typed builders for MongoDB filter documents (SoC)"""
from typing import Dict
from student_marks.utils.security.security_utils import sanitize_regex_input

# ═══════════════════════════════════════════════════════════════════════════════
# PROJECTIONS
# ═══════════════════════════════════════════════════════════════════════════════

ID_NAME_PROJECTION: Dict = {"_id": 0, "id": 1, "name": 1}
STUDENT_VIEW_PROJECTION: Dict = {"_id": 0, "id": 1, "name": 1, "phone": 1}
MARKS_PROJECTION: Dict = {"_id": 0, "marks": 1}

# ═══════════════════════════════════════════════════════════════════════════════
# IDENTITY / PHONE FILTERS
# ═══════════════════════════════════════════════════════════════════════════════

def by_id(student_id: int) -> Dict:
    return {"id": student_id}

def by_phone(phone: str) -> Dict:
    return {"phone": phone}

def by_phone_prefix(prefix: str) -> Dict:
    """Anchored, escaped regex: phone starts with prefix"""
    return {"phone": {"$regex": f"^{sanitize_regex_input(prefix)}"}}

# ═══════════════════════════════════════════════════════════════════════════════
# MARK SCORE / COUNT FILTERS
# ═══════════════════════════════════════════════════════════════════════════════

def _marks_size() -> Dict:
    return {"$size": {"$ifNull": ["$marks", []]}}

def all_marks_above(threshold: int) -> Dict:
    """At least one mark, and no mark with score <= threshold"""
    return {"$and": [
        {"marks": {"$elemMatch": {"score": {"$gt": threshold}}}},
        {"marks": {"$not": {"$elemMatch": {"score": {"$lte": threshold}}}}}
    ]}

def fewer_marks_than(amount: int) -> Dict:
    return {"$expr": {"$lt": [_marks_size(), amount]}}

def all_marks_in_subject_at_least(subject: str, threshold: int) -> Dict:
    """At least one mark in subject, and no mark of that subject below threshold"""
    return {"$and": [
        {"marks": {"$elemMatch": {"subject": subject}}},
        {"marks": {"$not": {"$elemMatch": {"subject": subject, "score": {"$lt": threshold}}}}}
    ]}

def marks_amount_between(min_amount: int, max_amount: int) -> Dict:
    """Mark count in the closed range [min_amount, max_amount]"""
    return {"$expr": {"$and": [
        {"$gte": [_marks_size(), min_amount]},
        {"$lte": [_marks_size(), max_amount]}
    ]}}
