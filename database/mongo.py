from __future__ import annotations

from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from core.config import Settings

_client: Optional[MongoClient] = None


def get_database(settings: Optional[Settings] = None) -> Database:
    global _client
    settings = settings or Settings.from_env()
    if _client is None:
        _client = MongoClient(settings.mongo_uri, serverSelectionTimeoutMS=5000)
    return _client[settings.mongo_db]


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


__all__ = ["get_database", "close_client"]
