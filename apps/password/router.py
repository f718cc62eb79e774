import logging

from fastapi import APIRouter

from apps.password.exception import http_bad_request
from apps.password.schemas import (
    PasswordCheckRequest,
    PasswordValidateRequest,
    StrengthResponse,
    ValidationResponse,
)
from common.responses import success_response
from security.password_rules import (
    assert_passwords_match,
    evaluate_password_strength,
    validate_password_strength,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/password", tags=["Password"])


@router.post("/strength", response_model=StrengthResponse)
async def password_strength(payload: PasswordCheckRequest):
    """
    Score a candidate password for a strength meter.
    Returns score (0-4), label, color and suggestions for the unmet checks.
    """
    verdict = evaluate_password_strength(payload.password)
    logger.debug("Strength evaluated: score=%s", verdict.score)
    return success_response(verdict.as_dict())


@router.post("/validate", response_model=ValidationResponse)
async def password_validate(payload: PasswordValidateRequest):
    """
    Check a password against the registration policy.
    - All four checks must pass for is_valid to be true
    - When confirm_password is sent, a mismatch is a 400
    """
    if payload.confirm_password is not None:
        try:
            assert_passwords_match(payload.password, payload.confirm_password)
        except ValueError as exc:
            raise http_bad_request(str(exc))

    is_valid, errors = validate_password_strength(payload.password)
    score = evaluate_password_strength(payload.password).score
    logger.debug("Policy evaluated: valid=%s score=%s", is_valid, score)
    return success_response({"is_valid": is_valid, "errors": errors, "score": score})
