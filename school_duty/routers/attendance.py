from fastapi import APIRouter, Depends

from school_duty.database import get_db
from school_duty.services.attendance_service import AttendanceService

router = APIRouter()


def get_service(db=Depends(get_db)) -> AttendanceService:
    return AttendanceService(db)


@router.get("/fetchAttendance/{schoolId}", summary="One student's attendance, newest first")
async def fetch_attendance(schoolId: str, service: AttendanceService = Depends(get_service)):
    result = await service.fetch_attendance(schoolId)
    return {
        "success": True,
        "message": "Attendance records retrieved successfully.",
        **result,
    }


@router.get("/fetchAllAttendance", summary="All class attendance, newest first")
async def fetch_all_attendance(service: AttendanceService = Depends(get_service)):
    attendances = await service.fetch_all_attendance()
    return {
        "success": True,
        "message": "All attendance records retrieved successfully.",
        "attendances": attendances,
    }


@router.get("/fetchAllDutyAttendance", summary="All duty attendance, newest first")
async def fetch_all_duty_attendance(service: AttendanceService = Depends(get_service)):
    attendances = await service.fetch_all_duty_attendance()
    return {
        "success": True,
        "message": "All duty attendance records retrieved successfully.",
        "attendances": attendances,
    }
