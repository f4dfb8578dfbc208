import logging

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from chairbook.auth import jwt_handler
from chairbook.models.user import UserRole, parse_role

logger = logging.getLogger(__name__)

security = HTTPBearer()


def get_actor_role(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> UserRole | None:
    token = credentials.credentials
    try:
        payload = jwt_handler.decode_access_token(token)
    except jwt.PyJWTError as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc

    if not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Invalid token subject")

    role = parse_role(payload.get("role"))
    if role is None:
        # Unknown roles are let through and end up with no permissions.
        logger.info("Token for %s carries unknown role %r", payload.get("sub"), payload.get("role"))
    return role
