import logging

from fastapi import APIRouter

from schemas.password_validation import (
    PasswordValidationRequest,
    PasswordValidationResponse,
)
from validation.password_rules import evaluate

logger = logging.getLogger(__name__)

password_validation_router = APIRouter(tags=["password"])


@password_validation_router.post(
    "/validar-senha",
    response_model=PasswordValidationResponse,
    response_model_exclude_none=True,
)
def validate_password(request: PasswordValidationRequest):
    """Runs the composition rules; rule violations still answer 200"""
    logger.info("Password validation request received")

    logger.info("Validating password")
    result = evaluate(request.password)
    logger.info(
        "Password validation finished: valid=%s, violations=%d",
        result.valid,
        len(result.errors),
    )

    return PasswordValidationResponse.from_result(result)
