"""
API Response Utilities for the Promoter Panel

Unified response format for all API endpoints.
"""
from typing import Any, Optional, Dict, List
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class APIResponse(BaseModel):
    """Standard API response format"""
    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    errors: Optional[List[str]] = None


# Service error code -> HTTP status
ERROR_STATUS: Dict[str, int] = {
    "NO_COOKIE": 401,
    "NO_CAMPAIGN_ID": 400,
    "NO_PROMOTER_FOUND": 404,
    "CAMPAIGN_NOT_FOUND": 404,
    "SERVER_ERROR": 500,
}


def success(data: Any = None, message: str = None, status_code: int = 200) -> JSONResponse:
    """Return success response"""
    return JSONResponse(
        content=APIResponse(success=True, data=data, message=message).model_dump(exclude={"errors"}),
        status_code=status_code
    )


def error(message: str, errors: List[str] = None, status_code: int = 400) -> JSONResponse:
    """Return error response"""
    return JSONResponse(
        content=APIResponse(success=False, message=message, errors=errors or []).model_dump(exclude={"data"}),
        status_code=status_code
    )


def from_error_code(code: str) -> JSONResponse:
    """Map a service error code to an error response; the code doubles as message"""
    return error(code, errors=[code], status_code=ERROR_STATUS.get(code, 500))
