"""
Router for the financial advice endpoint.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from ..errors import GENERATE_ADVICE_FAILED, INVALID_ANALYSIS_REQUEST, UpstreamError
from ..models import AdviceResponse, AnalyzeRequest, ErrorResponse
from .dependencies import AIServiceDep, json_body

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])


@router.post(
    "/analyze",
    response_model=AdviceResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    body: Annotated[
        AnalyzeRequest,
        Depends(json_body(AnalyzeRequest, INVALID_ANALYSIS_REQUEST)),
    ],
    ai_service: AIServiceDep,
) -> AdviceResponse:
    """
    Generate markdown advice from finances, portfolio, transactions and news.
    """
    try:
        advice = await ai_service.generate_advice(body)
    except Exception as e:
        logger.exception("AI analysis failed")
        raise UpstreamError(GENERATE_ADVICE_FAILED) from e

    return AdviceResponse(advice=advice)
