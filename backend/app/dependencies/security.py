from typing import Optional

from fastapi import Request

from app.services.errors import unauthorized


def require_user_id_header(request: Request) -> str:
    user_id = (request.headers.get("x-user-id") or "").strip()
    if not user_id:
        raise unauthorized(required_header="x-user-id")
    return user_id


def optional_header(request: Request, name: str) -> Optional[str]:
    return (request.headers.get(name) or "").strip() or None


def optional_user_id_header(request: Request) -> Optional[str]:
    return optional_header(request, "x-user-id")


def optional_device_id_header(request: Request) -> Optional[str]:
    return optional_header(request, "x-device-id")
