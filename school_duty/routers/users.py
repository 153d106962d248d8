from fastapi import APIRouter, Body, Depends

from school_duty.database import get_db
from school_duty.models.user import ContactInfoUpdate
from school_duty.services.user_service import UserService

router = APIRouter()


def get_service(db=Depends(get_db)) -> UserService:
    return UserService(db)


# ✅ only the family/address fields, partially
@router.put("/{id}/information", summary="Update a student's family and contact information")
async def update_information(
    id: str,
    data: ContactInfoUpdate | None = Body(None),
    service: UserService = Depends(get_service),
):
    user = await service.update_contact_info(id, data)
    return {
        "success": True,
        "message": "User contact information updated successfully.",
        "user": user,
    }
