from typing import List, Optional

from pydantic import BaseModel, Field

from settings.config import get_settings

_MAX_LENGTH = get_settings().PASSWORD_MAX_LENGTH


class PasswordCheckRequest(BaseModel):
    """
    Payload for the strength meter. Empty passwords are allowed.
    """
    password: str = Field(..., max_length=_MAX_LENGTH)


class PasswordValidateRequest(BaseModel):
    """
    Payload for the registration policy check.
    When confirm_password is given it must equal password.
    """
    password: str = Field(..., max_length=_MAX_LENGTH)
    confirm_password: Optional[str] = Field(default=None, max_length=_MAX_LENGTH)


class StrengthOut(BaseModel):
    score: int = Field(..., ge=0, le=4)
    label: str
    color: str = Field(..., pattern=r"^#[0-9a-f]{6}$")
    suggestions: List[str] = []


class StrengthResponse(BaseModel):
    message: str
    data: StrengthOut


class ValidationOut(BaseModel):
    is_valid: bool
    errors: List[str] = []
    score: int = Field(..., ge=0, le=4)


class ValidationResponse(BaseModel):
    message: str
    data: ValidationOut
