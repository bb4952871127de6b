from fastapi import APIRouter

from classical_ciphers.dependencies import RegistryDep
from classical_ciphers.models.schemas import CipherInfo, CipherListResponse

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List ciphers",
    description="List every cipher available for encryption and decryption.",
)
async def list_ciphers(registry: RegistryDep) -> CipherListResponse:
    """List registered ciphers with their metadata."""
    return CipherListResponse(
        ciphers=[
            CipherInfo(
                cipher_type=cipher_class.cipher_type,
                cipher_family=cipher_class.cipher_family,
                name=cipher_class.name,
                description=cipher_class.description,
            )
            for cipher_class in registry.get_all()
        ]
    )
