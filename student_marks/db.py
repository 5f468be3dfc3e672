import json
import os
from typing import Optional
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from student_marks.config.settings import DatabaseConfig, MONGO_CLIENT_CONFIG, COLLECTIONS

_client: Optional[MongoClient] = None

def get_mongo_url() -> str:
    """Resolve MongoDB url: DB_URL env, then local config file, then localhost."""
    if DatabaseConfig.DB_URL:
        return DatabaseConfig.DB_URL
    config_path = os.path.abspath(DatabaseConfig.LOCAL_CONFIG_FILE)
    try:
        with open(config_path, 'r') as config_file:
            config_data = json.load(config_file)
        return config_data['MONGO_CONFIG']['url']
    except FileNotFoundError:
        return DatabaseConfig.DEFAULT_URL

def get_mongo_client() -> MongoClient:
    """Get the shared MongoDB client (connection pooling is handled by pymongo)."""
    global _client
    if _client is None:
        _client = MongoClient(get_mongo_url(), **MONGO_CLIENT_CONFIG)
    return _client

def get_db() -> Database:
    return get_mongo_client()[DatabaseConfig.DB_NAME]

def get_collection(name: str) -> Collection:
    """Get collection by logical name (see COLLECTIONS) or raw collection name."""
    return get_db()[COLLECTIONS.get(name, name)]
