# app/shipping/client.py
"""HTTP client for the carrier rate API."""
from typing import Any, Iterator

import httpx

from app.core.config import Settings, get_settings


class CarrierRatesClient:
    def __init__(
        self,
        url: str,
        api_key: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self._http = httpx.Client(timeout=timeout_seconds, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings, transport: httpx.BaseTransport | None = None) -> "CarrierRatesClient":
        return cls(
            url=settings.RATES_API_URL,
            api_key=settings.RATES_API_KEY,
            timeout_seconds=settings.RATES_TIMEOUT_SECONDS,
            transport=transport,
        )

    def fetch_rates(self, payload: dict[str, Any]) -> Any:
        """POST ``payload`` to the carrier and return the decoded JSON body.

        Raises ``httpx.HTTPError`` on transport failure or a non-2xx status and
        ``ValueError`` when the body is not JSON.
        """
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        response = self._http.post(self.url, json=payload, headers=headers)
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        self._http.close()


def get_rates_client() -> Iterator[CarrierRatesClient]:
    client = CarrierRatesClient.from_settings(get_settings())
    try:
        yield client
    finally:
        client.close()
