from fastapi import APIRouter, Depends

from school_duty.database import get_db
from school_duty.services.duty_service import DutyService

router = APIRouter()


def get_service(db=Depends(get_db)) -> DutyService:
    return DutyService(db)


@router.get("/fetchDuties/{id}", summary="Duties of the user's group")
async def fetch_duties(id: str, service: DutyService = Depends(get_service)):
    result = await service.fetch_duties_for_user(id)
    return {"success": True, "message": "User duties retrieved successfully.", **result}


@router.get("/fetchAllDuties", summary="All groups with their duties")
async def fetch_all_duties(service: DutyService = Depends(get_service)):
    groups = await service.fetch_all_duties()
    return {
        "success": True,
        "message": "All groups' duties retrieved successfully.",
        "groups": groups,
    }


@router.get("/fetchAllDutiesByArea", summary="All duties grouped by area")
async def fetch_all_duties_by_area(service: DutyService = Depends(get_service)):
    areas = await service.fetch_all_duties_by_area()
    return {
        "success": True,
        "message": "All duties grouped by area retrieved successfully.",
        "areas": areas,
    }
