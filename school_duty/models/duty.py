from typing import Optional

from pydantic import BaseModel

UNASSIGNED_AREA = "Unassigned"

# member fields joined into a group
MEMBER_FIELDS = ("name", "email", "schoolId")


class GroupDuties(BaseModel):
    id: str
    name: Optional[str] = None
    members: list[dict] = []
    duties: list[dict] = []


class AreaDuties(BaseModel):
    area: str
    duties: list[dict] = []
