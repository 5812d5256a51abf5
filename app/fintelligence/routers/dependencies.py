"""
Shared request dependencies for the relay routers.

Handles:
- Access to the services built at startup
- PDF upload reading with the size limit
- JSON body parsing into per-endpoint request models
"""

import json
import logging
from typing import Annotated, Any, Callable

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError
from starlette.datastructures import UploadFile

from ..config import Settings, get_settings
from ..errors import (
    BODY_TOO_LARGE,
    NO_PDF_UPLOADED,
    PDF_TOO_LARGE,
    PayloadTooLargeError,
    RelayValidationError,
)
from ..services.ai import AIService
from ..services.pdf_service import PDFService

logger = logging.getLogger(__name__)


def get_ai_service(request: Request) -> AIService:
    """Return the AI service created in the application lifespan."""
    return request.app.state.ai_service


def get_pdf_service(request: Request) -> PDFService:
    """Return the PDF service created in the application lifespan."""
    return request.app.state.pdf_service


async def read_pdf_upload(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> bytes:
    """
    Read the ``pdf`` multipart field into memory.

    The form is read here rather than declared as a ``File`` parameter so
    that a ``pdf`` field sent as plain text counts as no file at all.

    Raises:
        RelayValidationError: If no file was uploaded.
        PayloadTooLargeError: If the file exceeds the upload limit.
    """
    form = await request.form()
    pdf = form.get("pdf")
    if not isinstance(pdf, UploadFile):
        raise RelayValidationError(NO_PDF_UPLOADED)

    try:
        # One byte past the limit is enough to know it is too large
        file_bytes = await pdf.read(settings.max_upload_bytes + 1)
    finally:
        await pdf.close()

    if len(file_bytes) > settings.max_upload_bytes:
        logger.warning(
            "Rejected upload %s: over %d bytes", pdf.filename, settings.max_upload_bytes
        )
        raise PayloadTooLargeError(PDF_TOO_LARGE)

    logger.info("Received PDF: %s (%d bytes)", pdf.filename, len(file_bytes))
    return file_bytes


def json_body(model: type[BaseModel], message: str) -> Callable[..., Any]:
    """
    Build a dependency that parses the JSON body into ``model``.

    Any decoding or shape problem fails with ``message`` as a 400.
    """

    async def dependency(
        request: Request,
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> BaseModel:
        body = await request.body()
        if len(body) > settings.max_json_body_bytes:
            raise PayloadTooLargeError(BODY_TOO_LARGE)

        try:
            payload = json.loads(body)
        except ValueError as e:
            logger.info("Rejected %s: body is not JSON", request.url.path)
            raise RelayValidationError(message) from e

        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.info(
                "Rejected %s: %d validation error(s)", request.url.path, e.error_count()
            )
            raise RelayValidationError(message) from e

    return dependency


AIServiceDep = Annotated[AIService, Depends(get_ai_service)]
PDFServiceDep = Annotated[PDFService, Depends(get_pdf_service)]
PDFUpload = Annotated[bytes, Depends(read_pdf_upload)]
