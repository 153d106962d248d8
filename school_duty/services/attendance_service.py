import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from school_duty.core.exceptions import NotFoundError
from school_duty.models.attendance import ATTENDANCE_USER_FIELDS, AttendanceType
from school_duty.models.user import UserSummary
from school_duty.utils.common import serialize_doc
from school_duty.utils.populate import populate

logger = logging.getLogger(__name__)

# internal versioning field is never returned
HIDDEN_FIELDS = {"__v": 0}


class AttendanceService:

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def fetch_attendance(self, school_id: str):
        """Attendance of one student, newest first, with a short user summary."""
        user = await self.db.users.find_one({"schoolId": school_id})
        if not user:
            raise NotFoundError("User not found.")

        records = await (
            self.db.attendances.find({"schoolId": school_id}, HIDDEN_FIELDS)
            .sort("date", -1)
            .to_list(length=None)
        )
        logger.info("✅ Get User(%s) attendance records: %d", school_id, len(records))

        summary = UserSummary(id=str(user["_id"]), name=user.get("name"), schoolId=user.get("schoolId"))
        return {"user": summary.model_dump(), "records": serialize_doc(records)}

    async def fetch_all_attendance(self):
        return await self._fetch_by_type(AttendanceType.CLASS)

    async def fetch_all_duty_attendance(self):
        return await self._fetch_by_type(AttendanceType.DUTY, with_group=True)

    async def _fetch_by_type(self, attendance_type: AttendanceType, with_group: bool = False):
        attendances = await (
            self.db.attendances.find({"attendanceType": attendance_type.value}, HIDDEN_FIELDS)
            .sort("date", -1)
            .to_list(length=None)
        )
        # an empty listing is reported as 404, not as []
        if not attendances:
            raise NotFoundError("No attendance records found.")

        await populate(self.db.users, attendances, "user", ATTENDANCE_USER_FIELDS)
        if with_group:
            await populate(self.db.groups, attendances, "group", ("name",))

        logger.info("✅ Get all %s attendance records: %d", attendance_type.value, len(attendances))
        return serialize_doc(attendances)
