"""
Router for the simulated brokerage connection.

The endpoint does not talk to any brokerage. It returns a portfolio
generated by the model so the dashboard can be demoed without real
account access.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends

from ..errors import CONNECT_BROKERAGE_FAILED, INVALID_API_KEY, UpstreamError
from ..models import BrokerageConnectRequest, ErrorResponse
from .dependencies import AIServiceDep, json_body

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["brokerage"])


@router.post(
    "/connect-brokerage",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def connect_brokerage(
    body: Annotated[
        BrokerageConnectRequest,
        Depends(json_body(BrokerageConnectRequest, INVALID_API_KEY)),
    ],
    ai_service: AIServiceDep,
) -> dict[str, Any]:
    """
    Return a simulated portfolio for the supplied key.

    Only the last four characters of the key leave this process.
    """
    try:
        return await ai_service.simulate_brokerage_portfolio(body.key_suffix)
    except Exception as e:
        logger.exception("Brokerage simulation failed")
        raise UpstreamError(CONNECT_BROKERAGE_FAILED) from e
