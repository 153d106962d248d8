import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from school_duty.core.exceptions import NotFoundError
from school_duty.models.duty import MEMBER_FIELDS, UNASSIGNED_AREA, AreaDuties, GroupDuties
from school_duty.models.user import DutyUserSummary
from school_duty.utils.common import group_by, serialize_doc, to_object_id
from school_duty.utils.populate import populate

logger = logging.getLogger(__name__)


class DutyService:

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def fetch_duties_for_user(self, user_id: str):
        """
        Duties of the group the user belongs to, oldest first.

        Errors:
        - 404 "User not found.": no such user (or the id is not an ObjectId);
        - 404 "This user does not belong to any group, so no duties.": the
          user has no group, or the group it points to no longer exists.
        """
        oid = to_object_id(user_id)
        user = await self.db.users.find_one({"_id": oid}) if oid else None
        if not user:
            raise NotFoundError("User not found.")

        group = await self.db.groups.find_one({"_id": user["group"]}) if user.get("group") else None
        if not group:
            raise NotFoundError("This user does not belong to any group, so no duties.")

        await populate(self.db.users, [group], "members", MEMBER_FIELDS)
        duties = await self.db.duties.find({"group": group["_id"]}).sort("date", 1).to_list(length=None)
        for duty in duties:
            duty["group"] = group

        logger.info("✅ Get User(%s) duties: %d", user_id, len(duties))
        summary = DutyUserSummary(
            id=str(user["_id"]),
            name=user.get("name"),
            email=user.get("email"),
            group=group.get("name"),
        )
        return {"user": summary.model_dump(), "duties": serialize_doc(duties)}

    async def fetch_all_duties(self):
        """Every group with its members and the duties assigned to it."""
        groups = await self.db.groups.find().to_list(length=None)
        if not groups:
            raise NotFoundError("No groups found.")
        await populate(self.db.users, groups, "members", MEMBER_FIELDS)

        duties = await self._all_duties()

        result = []
        for group in groups:
            group_id = str(group["_id"])
            group_duties = [
                duty for duty in duties
                if duty.get("group") and str(duty["group"]["_id"]) == group_id
            ]
            entry = GroupDuties(
                id=group_id,
                name=group.get("name"),
                members=group.get("members") or [],
                duties=group_duties,
            )
            result.append(entry.model_dump())

        logger.info("✅ Get all duties: %d groups, %d duties", len(groups), len(duties))
        return serialize_doc(result)

    async def fetch_all_duties_by_area(self):
        """All duties bucketed by area; a missing or empty area goes to "Unassigned"."""
        duties = await self._all_duties()
        if not duties:
            raise NotFoundError("No duties found.")

        by_area = group_by(duties, lambda duty: duty.get("area") or UNASSIGNED_AREA)
        result = [AreaDuties(area=area, duties=items).model_dump() for area, items in by_area.items()]

        logger.info("✅ Get all duties by area: %d areas", len(result))
        return serialize_doc(result)

    async def _all_duties(self):
        duties = await self.db.duties.find().sort("date", 1).to_list(length=None)
        return await populate(self.db.groups, duties, "group", ("name",))
