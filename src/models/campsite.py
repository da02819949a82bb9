from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field, PlainSerializer

from src.models.base import CamelModel

# JSON clients expect the nightly fee as a number, not a string
Money = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CampsiteType(CamelModel):
    id: int
    campsite_type_name: str
    fee_per_night: Money
    max_reservation_days: int = Field(..., gt=0)


class CampsitePayload(CamelModel):
    """Body of a create or update request."""

    nickname: str
    campsite_type_id: int
    image_url: Optional[str] = None


class Campsite(CampsitePayload):
    id: int


class CampsiteDetail(Campsite):
    """A campsite with its type nested underneath it."""

    campsite_type: CampsiteType
