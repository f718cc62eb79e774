from fastapi import HTTPException, status


def http_bad_request(detail: str) -> HTTPException:
    """
    400 Bad Request response shortcut.
    """
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
