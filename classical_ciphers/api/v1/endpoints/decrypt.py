import logging

from fastapi import APIRouter, HTTPException, status

from classical_ciphers.core.exceptions import ValidationError
from classical_ciphers.dependencies import RegistryDep, SettingsDep
from classical_ciphers.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """Decrypt ciphertext with a known cipher type and key."""
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_text_length}",
        )

    try:
        cipher = registry.create(request.cipher_type, request.key)
    except ValidationError as e:
        logger.warning("Rejected decryption key: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    logger.info("Decrypting %d characters with %r", len(request.ciphertext), cipher)
    result = cipher.decrypt_with_result(request.ciphertext)

    return DecryptResponse(
        plaintext=result.plaintext,
        cipher_type=request.cipher_type,
        key_used=result.key,
        explanation=result.explanation,
    )
