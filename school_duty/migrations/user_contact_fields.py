"""
Backfills the family/contact fields onto existing user documents.

Every field that a user document lacks is set to "". Fields that already
exist are left alone, so the migration can be re-run safely.

    python -m school_duty.migrations.user_contact_fields
"""

import asyncio
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from school_duty.config import LOG_LEVEL
from school_duty.database import Database, database
from school_duty.models.user import CONTACT_FIELDS

logger = logging.getLogger(__name__)


async def backfill_contact_fields(db: AsyncIOMotorDatabase) -> dict:
    total = await db.users.count_documents({})
    modified = {}
    for field in CONTACT_FIELDS:
        result = await db.users.update_many({field: {"$exists": False}}, {"$set": {field: ""}})
        modified[field] = result.modified_count

    logger.info("✅ Migration complete! Users: %d", total)
    for field, count in modified.items():
        logger.info("   %s: %d documents modified", field, count)
    return {"users": total, "modified": modified}


async def run_migration(db_owner: Database = database) -> dict:
    await db_owner.connect()
    try:
        return await backfill_contact_fields(db_owner.db)
    finally:
        db_owner.disconnect()


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(message)s")
    try:
        asyncio.run(run_migration())
    except Exception:
        logger.exception("❌ Migration failed")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
