"""
Router for statement parsing endpoints.

Handles:
- Balance and transaction extraction from a bank statement PDF
- Categorized transaction extraction from a statement PDF
- Categorized transaction extraction from pasted text
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from ..errors import (
    NO_TRANSACTION_DATA,
    PARSE_PDF_FAILED,
    PARSE_TRANSACTION_PDF_FAILED,
    PARSE_TRANSACTIONS_FAILED,
    UpstreamError,
)
from ..models import ErrorResponse, TransactionTextRequest
from ..services.ai import TransactionSource
from .dependencies import AIServiceDep, PDFServiceDep, PDFUpload, json_body

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["statements"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/parse-pdf", responses=ERROR_RESPONSES)
async def parse_pdf(
    pdf_bytes: PDFUpload,
    pdf_service: PDFServiceDep,
    ai_service: AIServiceDep,
) -> dict[str, Any]:
    """
    Extract checking/savings balances and transactions from a statement PDF.

    Returns the model's ``{checking, savings, transactions}`` object as-is.
    """
    try:
        text = await run_in_threadpool(
            pdf_service.extract_text, pdf_bytes, ai_service.max_prompt_chars
        )
        return await ai_service.parse_bank_summary(text)
    except Exception as e:
        logger.exception("PDF parsing failed")
        raise UpstreamError(PARSE_PDF_FAILED) from e


@router.post("/parse-transaction-pdf", responses=ERROR_RESPONSES)
async def parse_transaction_pdf(
    pdf_bytes: PDFUpload,
    pdf_service: PDFServiceDep,
    ai_service: AIServiceDep,
) -> dict[str, Any]:
    """
    Extract categorized transactions and a spending summary from a statement PDF.
    """
    try:
        text = await run_in_threadpool(
            pdf_service.extract_text, pdf_bytes, ai_service.max_prompt_chars
        )
        return await ai_service.parse_transactions(text, TransactionSource.DOCUMENT)
    except Exception as e:
        logger.exception("Transaction PDF parsing failed")
        raise UpstreamError(PARSE_TRANSACTION_PDF_FAILED) from e


@router.post("/parse-transactions", responses=ERROR_RESPONSES)
async def parse_transactions(
    body: Annotated[
        TransactionTextRequest,
        Depends(json_body(TransactionTextRequest, NO_TRANSACTION_DATA)),
    ],
    ai_service: AIServiceDep,
) -> dict[str, Any]:
    """
    Extract categorized transactions and a spending summary from pasted text.
    """
    try:
        return await ai_service.parse_transactions(body.text, TransactionSource.TEXT)
    except Exception as e:
        logger.exception("Transaction parsing failed")
        raise UpstreamError(PARSE_TRANSACTIONS_FAILED) from e
