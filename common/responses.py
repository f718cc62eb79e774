from typing import Any, Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse


def success_response(data: Any, message: str = "Success") -> Dict[str, Any]:
    """
    Standard success response envelope.
    """
    return {"message": message, "data": data}


def error_response(message: str, details: Optional[Any] = None) -> Dict[str, Any]:
    """
    Standard error response envelope.
    """
    payload: Dict[str, Any] = {"message": message}
    if details is not None:
        payload["details"] = details
    return payload


def error_json(
    message: str,
    details: Optional[Any] = None,
    status_code: int = status.HTTP_503_SERVICE_UNAVAILABLE,
) -> JSONResponse:
    """
    Error envelope wrapped in a JSONResponse, for handlers that report failure without raising.
    """
    return JSONResponse(status_code=status_code, content=error_response(message, details))
