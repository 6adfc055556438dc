from dataclasses import dataclass, field
from typing import Any, Dict

from fastapi import status


@dataclass
class ServiceError(Exception):
    """Service-layer failure carrying the HTTP status and error envelope fields."""

    status_code: int
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def envelope(self) -> Dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message, "details": self.details}}

    def __str__(self) -> str:  # pragma: no cover - convenience for logging
        return f"{self.status_code} {self.code}: {self.message} | {self.details}"


def not_found(code: str, message: str, **details: Any) -> ServiceError:
    return ServiceError(status.HTTP_404_NOT_FOUND, code, message, details)


def conflict(code: str, message: str, **details: Any) -> ServiceError:
    return ServiceError(status.HTTP_409_CONFLICT, code, message, details)


def unauthorized(**details: Any) -> ServiceError:
    return ServiceError(status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", "Missing or invalid user context.", details)
