"""Index Utilities - Database Performance and id uniqueness (SoC)"""
from typing import Optional
from pymongo import ASCENDING
from pymongo.collection import Collection
from student_marks.db import get_collection
from student_marks.logging_logs.log_config import get_logger, setup_logging

logger = get_logger("indexes")

def ensure_indexes(collection: Optional[Collection] = None) -> None:
    """Create the unique id index and the phone lookup index (idempotent)"""
    if collection is None:
        collection = get_collection('student_collection')
    collection.create_index([("id", ASCENDING)], unique=True, name="id_unique")
    collection.create_index([("phone", ASCENDING)], name="phone_1")
    logger.info(f"Indexes ensured on {collection.name}")

if __name__ == "__main__":
    setup_logging()
    ensure_indexes()
