#!/usr/bin/env python3
"""
MongoDB Check Script

Run this to verify the database connection and see what it holds.
Usage: python scripts/check_mongo.py
"""
import sys
sys.path.insert(0, '.')

from app.core.config import get_settings
from app.db.mongodb import COLLECTIONS, check_mongo_connection, create_mongo_client


def main():
    settings = get_settings()
    print("=" * 50)
    print("JOB BOARD - MONGODB CHECK")
    print("=" * 50)

    print(f"\n    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")

    client = create_mongo_client(settings)
    db = client[settings.mongodb_db]
    if not check_mongo_connection(db):
        print("    ❌ MongoDB: FAILED")
        sys.exit(1)
    print("    ✅ MongoDB: CONNECTED")

    print("\nDocument counts:")
    for name in COLLECTIONS.values():
        print(f"    {name}: {db[name].count_documents({})}")

    company = db[COLLECTIONS["companies"]].find_one()
    if company:
        print(f"\nSample company: {company['_id']} {company['name']}")

    job = db[COLLECTIONS["jobs"]].find_one()
    if job:
        print(f"Sample job: {job['_id']} {job['title']} (companyId={job['companyId']})")

    client.close()
    print("\n" + "=" * 50)


if __name__ == "__main__":
    main()
