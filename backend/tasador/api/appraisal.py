from typing import Dict, List

from fastapi import APIRouter, Depends

from tasador.api.deps import get_catalog_path
from tasador.schemas.listing import AppraisalDetails, AppraisalRequest, AppraisalResponse, ErrorOut
from tasador.services.catalog import load_listings
from tasador.services.pricing import appraise, validate_request

router = APIRouter(prefix="/api", tags=["appraisal"])


@router.post(
    "/tasacion",
    response_model=AppraisalResponse,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}, 422: {"model": ErrorOut}},
)
def estimate_price(payload: AppraisalRequest, catalog_path: str = Depends(get_catalog_path)) -> AppraisalResponse:
    data = payload.model_dump(by_alias=True)
    # Reject incomplete requests before touching the catalog.
    validate_request(data)
    listings: List[Dict] = load_listings(catalog_path)
    result = appraise(listings, data)
    return AppraisalResponse(
        tasacion=result.price,
        detalles=AppraisalDetails(**data),
        coche_similar=dict(result.reference),
    )
