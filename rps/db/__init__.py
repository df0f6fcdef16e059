"""
Database module - MongoDB connection.
"""
from rps.db.mongodb import create_mongo_client, get_database, test_mongo_connection, init_mongo_indexes

__all__ = [
    "create_mongo_client",
    "get_database",
    "test_mongo_connection",
    "init_mongo_indexes",
]
