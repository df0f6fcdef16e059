"""
MongoDB Service - CRUD operations for document collections.

Collections in this database:
1. students - registered students (one per name triple)
2. results  - per-semester results (one per regNo + semester)
3. courses  - subject listings (one per department + semester)

All lookups are exact-match filters; nothing here validates input,
the request handlers do that before calling in.
"""

from datetime import datetime, timezone
from typing import Optional, List

from bson.errors import BSONError
from fastapi import Request
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from rps.db.mongodb import COLLECTIONS

# What a store call can raise: driver failures, and documents BSON cannot
# encode (NUL in a key raises InvalidDocument, ints past 8 bytes OverflowError)
STORE_ERRORS = (PyMongoError, BSONError, OverflowError)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


# ============================================================
# STUDENTS COLLECTION
# ============================================================

class StudentService:
    """
    Handles student documents.
    Students are created once and never updated.
    """

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["students"]]

    def find_by_names(self, student_name: str, father_name: str, mother_name: str) -> Optional[dict]:
        """Exact-match lookup on the (student, father, mother) name triple."""
        doc = self.collection.find_one({
            "studentName": student_name,
            "fatherName": father_name,
            "motherName": mother_name,
        })
        return serialize_doc(doc)

    def count_by_department(self, department: str) -> int:
        """Number of students registered under exactly this department value."""
        return self.collection.count_documents({"department": department})

    def insert(self, student: dict) -> dict:
        doc = dict(student, createdAt=utcnow())
        self.collection.insert_one(doc)
        return serialize_doc(doc)


# ============================================================
# RESULTS COLLECTION
# ============================================================

class ResultService:
    """
    Handles semester result documents.
    The payload is stored as submitted, plus a createdAt stamp.
    """

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["results"]]

    def get(self, reg_no: str, semester: str) -> Optional[dict]:
        doc = self.collection.find_one({"regNo": reg_no, "semester": semester})
        return serialize_doc(doc)

    def insert(self, result: dict) -> dict:
        doc = dict(result, createdAt=utcnow())
        self.collection.insert_one(doc)
        return serialize_doc(doc)


# ============================================================
# COURSES COLLECTION
# ============================================================

class CourseService:
    """
    Handles course listings.
    One document per (department, semester); writes replace the subjects.
    """

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["courses"]]

    def upsert(self, department: str, semester: str, subjects: List) -> dict:
        """
        Store the subject list for a department and semester.

        createdAt is set on the first write only, updatedAt on every write.
        """
        now = utcnow()
        doc = self.collection.find_one_and_update(
            {"department": department, "semester": semester},
            {
                "$set": {"subjects": subjects, "updatedAt": now},
                "$setOnInsert": {"createdAt": now},
            },
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return serialize_doc(doc)

    def get(self, department: str, semester: str) -> Optional[dict]:
        doc = self.collection.find_one({"department": department, "semester": semester})
        return serialize_doc(doc)


# ============================================================
# STORE HANDLE: all services over one database
# ============================================================

class RecordStore:
    """
    Process-scoped handle over the records database.

    Usage:
        store = RecordStore(client["rps"])
        store.students.count_by_department("CSE")
    """

    def __init__(self, db: Database):
        self.db = db
        self.students = StudentService(db)
        self.results = ResultService(db)
        self.courses = CourseService(db)


def get_store(request: Request) -> RecordStore:
    """
    Dependency for FastAPI route injection.
    Usage:
        @router.get("/things")
        def things(store: RecordStore = Depends(get_store)):
            ...
    """
    return request.app.state.store
