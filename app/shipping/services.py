# app/shipping/services.py
import logging
from typing import Any

import httpx

from app.core.errors import RatesUnavailableError
from app.shipping.client import CarrierRatesClient
from app.shipping.schemas import RateRequest

logger = logging.getLogger(__name__)


def get_rates(client: CarrierRatesClient, request: RateRequest) -> Any:
    try:
        rates = client.fetch_rates(request.model_dump())
    except (httpx.HTTPError, ValueError) as e:
        raise RatesUnavailableError(f"{type(e).__name__}: {e}") from e
    logger.debug("Carrier rates fetched for %s -> %s", request.origin, request.destination)
    return rates
