# app/shipping/routes.py
from fastapi import APIRouter, Depends
from app.shipping.client import CarrierRatesClient, get_rates_client
from app.shipping.schemas import RateRequest
from app.shipping import services as shipping_service

router = APIRouter(prefix="/api/shipping", tags=["Shipping"])


@router.post("/getRates", responses={500: {"description": "Error fetching rates"}})
def get_rates(request: RateRequest, client: CarrierRatesClient = Depends(get_rates_client)):
    # Upstream body is returned untouched
    return shipping_service.get_rates(client, request)
