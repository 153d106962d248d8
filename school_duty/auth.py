import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from school_duty.config import ADMIN_ROLES, JWT_ALGORITHM, JWT_SECRET
from school_duty.core.exceptions import AuthenticationError, AuthorizationError

bearer = HTTPBearer(auto_error=False)


async def protect_routes(credentials: HTTPAuthorizationCredentials | None = Depends(bearer)) -> dict:
    """Decodes the bearer token; its payload carries `sub`, `schoolId` and `role`."""
    if credentials is None:
        raise AuthenticationError("Not authorized, no token.")

    try:
        return jwt.decode(credentials.credentials, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired.")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Not authorized, invalid token.")


async def self_or_admin(request: Request, caller: dict = Depends(protect_routes)) -> dict:
    """
    Lets admins through, and otherwise only the user the path points at
    (by `id` or by `schoolId`). Routes with no subject in the path are admin-only.
    """
    if caller.get("role") in ADMIN_ROLES:
        return caller

    params = request.path_params
    if "id" in params and params["id"] == str(caller.get("sub")):
        return caller
    if "schoolId" in params and caller.get("schoolId") and params["schoolId"] == caller["schoolId"]:
        return caller

    raise AuthorizationError("Access denied.")
