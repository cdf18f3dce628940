# app/middleware/rbac.py
from typing import Optional

from fastapi import Header, Request

from app.core.error_messages import AuthRequired
from app.utils.auth_utils import Identity, verify_token


def extract_token(authorization: Optional[str]) -> Optional[str]:
    # Accepts "Bearer <token>" as well as a bare token
    if not authorization or not authorization.strip():
        return None
    return authorization.split()[-1]


def get_current_user(request: Request, authorization: Optional[str] = Header(None)) -> Identity:
    token = extract_token(authorization)
    if token is None:
        raise AuthRequired()
    user = verify_token(token)
    request.state.user = user
    return user
