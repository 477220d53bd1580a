import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from sigaba.core.exceptions import CipherError, CipherNotFoundError
from sigaba.dependencies import SettingsDep
from sigaba.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from sigaba.services.engines.registry import CipherRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description=(
        "Encrypt plaintext with a specified cipher type and key. "
        "Characters outside the alphabet are kept in place."
    ),
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    The text is passed to the cipher verbatim, so case and punctuation
    survive in the output.
    """
    # Validate plaintext length
    if len(request.plaintext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_text_length}",
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

    logger.info(f"Encrypting {len(request.plaintext)} chars with {request.cipher_type.value}")

    try:
        ciphertext = cipher.encrypt(request.plaintext)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {str(e)}",
        )

    return EncryptResponse(
        ciphertext=ciphertext,
        cipher_type=request.cipher_type,
        alphabet=cipher.alphabet.symbols,
    )
