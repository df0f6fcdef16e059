"""
MongoDB Connection Utility

MongoDB stores:
- students: registered students
- results:  per-semester results
- courses:  subject listings per department and semester

The client is created once at startup (see rps.main) and handed to
request handlers through dependency injection, so tests can swap in an
in-memory database.
"""
import logging

from pymongo import MongoClient, ASCENDING
from pymongo.database import Database

from rps.core.config import Settings

logger = logging.getLogger(__name__)


# Collection name constants (avoid typos)
COLLECTIONS = {
    "students": "students",
    "results": "results",
    "courses": "courses",
}


def create_mongo_client(settings: Settings) -> MongoClient:
    """Create a MongoDB client (connection pooling handled internally by pymongo)"""
    return MongoClient(settings.mongo_uri)


def get_database(client: MongoClient, settings: Settings) -> Database:
    """Get the records database"""
    return client[settings.mongo_db]


def test_mongo_connection(client: MongoClient) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        client.admin.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes for lookups and uniqueness backstops.
    Call this once during app startup.
    """
    students = db[COLLECTIONS["students"]]
    students.create_index("registrationNumber", unique=True)
    students.create_index("department")
    students.create_index([
        ("studentName", ASCENDING),
        ("fatherName", ASCENDING),
        ("motherName", ASCENDING),
    ])

    # One result per student per semester
    db[COLLECTIONS["results"]].create_index([
        ("regNo", ASCENDING),
        ("semester", ASCENDING),
    ], unique=True)

    # Courses are upserted on (department, semester)
    db[COLLECTIONS["courses"]].create_index([
        ("department", ASCENDING),
        ("semester", ASCENDING),
    ], unique=True)

    logger.info("MongoDB indexes created successfully")
