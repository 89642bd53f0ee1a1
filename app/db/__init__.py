"""
Database module - MongoDB connection, indexes and demo data.
"""
from app.db.mongodb import (
    COLLECTIONS,
    check_mongo_connection,
    create_mongo_client,
    get_mongo_db,
    init_mongo_indexes,
)
from app.db.demo_data import init_demo_data

__all__ = [
    "COLLECTIONS",
    "check_mongo_connection",
    "create_mongo_client",
    "get_mongo_db",
    "init_demo_data",
    "init_mongo_indexes",
]
