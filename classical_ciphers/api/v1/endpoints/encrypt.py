import logging

from fastapi import APIRouter, HTTPException, status

from classical_ciphers.core.exceptions import ValidationError
from classical_ciphers.dependencies import RegistryDep, SettingsDep
from classical_ciphers.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type. A random key is used when none is given.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    The plaintext is normalized by the cipher before encryption, so the
    ciphertext only ever contains the cipher's alphabet.
    """
    # Validate plaintext length
    if len(request.plaintext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_text_length}",
        )

    key = request.key
    if key is None:
        key = registry.get_cipher_class(request.cipher_type).generate_random_key()

    try:
        cipher = registry.create(request.cipher_type, key)
    except ValidationError as e:
        logger.warning("Rejected encryption key: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    logger.info("Encrypting %d characters with %r", len(request.plaintext), cipher)

    return EncryptResponse(
        ciphertext=cipher.encrypt(request.plaintext),
        cipher_type=request.cipher_type,
        key_used=cipher.key,
    )
