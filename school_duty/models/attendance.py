from enum import Enum


class AttendanceType(str, Enum):
    CLASS = "Class"
    DUTY = "Duty"


# fields of the owning user joined into attendance listings
ATTENDANCE_USER_FIELDS = ("username", "name", "year", "schoolId", "section")
