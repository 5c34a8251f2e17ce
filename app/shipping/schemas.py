# app/shipping/schemas.py
from typing import Any

from pydantic import BaseModel


class RateRequest(BaseModel):
    # Required but forwarded as sent; the carrier decides what it accepts
    origin: Any
    destination: Any
    weight: Any
