"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

# Database Configuration
class DatabaseConfig:
    DB_URL = os.getenv("DB_URL")
    DB_NAME = os.getenv("DB_NAME", "students_db")
    LOCAL_CONFIG_FILE = os.getenv("LOCAL_CONFIG_FILE", "local_config.json")
    DEFAULT_URL = "mongodb://localhost:27017"

# MongoDB connection pool configuration
MONGO_CLIENT_CONFIG: Dict[str, Any] = {
    'maxPoolSize': safe_int_env("MONGO_MAX_POOL_SIZE", "100"),
    'minPoolSize': safe_int_env("MONGO_MIN_POOL_SIZE", "0"),
    'connectTimeoutMS': safe_int_env("MONGO_CONNECT_TIMEOUT_MS", "10000"),
    'serverSelectionTimeoutMS': safe_int_env("MONGO_SERVER_SELECTION_TIMEOUT_MS", "10000"),
    'socketTimeoutMS': safe_int_env("MONGO_SOCKET_TIMEOUT_MS", "60000"),
    'retryWrites': True,
    'retryReads': True,
}

# Collection names (logical name -> MongoDB collection)
COLLECTIONS: Dict[str, str] = {
    'student_collection': os.getenv("STUDENTS_COLLECTION", "students"),
}

# Ranking Configuration (Business Configuration)
BEST_STUDENT_SCORE_THRESHOLD = 80

# Logging Configuration
class LogConfig:
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    LOG_FILE = os.getenv("LOG_FILE", "student_marks.log")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    MAX_LOG_SIZE = safe_int_env("LOG_MAX_BYTES", str(10 * 1024 * 1024))  # 10 MB
    BACKUP_COUNT = safe_int_env("LOG_BACKUP_COUNT", "5")
