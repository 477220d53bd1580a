from fastapi import APIRouter

from sigaba.models.schemas import CipherInfo, CipherListResponse
from sigaba.services.engines.registry import CipherRegistry

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List ciphers",
    description="List every registered cipher with its family and the key fields it accepts.",
)
async def list_ciphers() -> CipherListResponse:
    """List registered ciphers."""
    registry = CipherRegistry()
    ciphers = [
        CipherInfo(
            cipher_type=entry.cipher_type,
            cipher_family=entry.cipher_family,
            description=entry.description,
            key_fields=entry.key_fields,
        )
        for entry in registry.get_all_entries()
    ]
    return CipherListResponse(ciphers=ciphers, total=len(ciphers))
