#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the MongoDB connection and indexes are working.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from rps.core.config import get_settings
from rps.db.mongodb import create_mongo_client, get_database, init_mongo_indexes, test_mongo_connection


def main():
    settings = get_settings()
    print("=" * 50)
    print("RPS SERVER - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing MongoDB...")
    print(f"    Database: {settings.mongo_db}")
    client = create_mongo_client(settings)
    if not test_mongo_connection(client):
        print("    ❌ MongoDB: FAILED")
        return 1
    print("    ✅ MongoDB: CONNECTED")

    print("\n[2] Creating indexes...")
    db = get_database(client, settings)
    init_mongo_indexes(db)
    for name in ("students", "results", "courses"):
        print(f"    ✅ {name}: {sorted(db[name].index_information())}")

    client.close()
    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
