import logging

from pymongo import ReturnDocument
from motor.motor_asyncio import AsyncIOMotorDatabase

from school_duty.core.exceptions import NotFoundError, ValidationError
from school_duty.models.user import ContactInfoUpdate
from school_duty.utils.common import serialize_doc, to_object_id

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def update_contact_info(self, user_id: str, data: ContactInfoUpdate | None):
        """Applies only the non-empty contact fields; nothing is written when none survive."""
        changes = data.changes() if data else {}
        if not changes:
            raise ValidationError("No valid family or address fields provided for update.")

        oid = to_object_id(user_id)
        if oid is None:
            raise NotFoundError("User not found.")

        updated = await self.db.users.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            projection={"password": 0},
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            raise NotFoundError("User not found.")

        logger.info("✅ Updated User(%s) contact fields: %s", user_id, ", ".join(changes))
        return serialize_doc(updated)
