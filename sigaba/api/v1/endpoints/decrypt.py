import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from sigaba.core.exceptions import CipherError, CipherNotFoundError
from sigaba.dependencies import SettingsDep
from sigaba.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse
from sigaba.services.engines.registry import CipherRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Decrypt with known key",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a known cipher type and key.

    Columnar decryption returns the plaintext followed by the random
    padding added at encryption time.
    """
    if len(request.ciphertext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_text_length}",
        )

    registry = CipherRegistry()

    try:
        cipher = registry.build(
            request.cipher_type,
            request.key,
            request.alphabet or settings.default_alphabet,
        )
    except CipherNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Cipher type '{request.cipher_type.value}' is not supported",
        )
    except (CipherError, PydanticValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    logger.info(f"Decrypting {len(request.ciphertext)} chars with {request.cipher_type.value}")

    try:
        plaintext = cipher.decrypt(request.ciphertext)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )

    return DecryptResponse(
        plaintext=plaintext,
        cipher_type=request.cipher_type,
        alphabet=cipher.alphabet.symbols,
    )
