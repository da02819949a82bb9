from datetime import date

from pydantic import Field

from src.models.base import CamelModel
from src.models.campsite import CampsiteDetail
from src.models.user_profile import UserProfile


class ReservationPayload(CamelModel):
    """
    Body of a create request.

    Dates are plain calendar days. No ordering between them is checked and the
    stay length is not compared against the campsite type's limit.
    """

    campsite_id: int
    user_profile_id: int
    checkin_date: date = Field(..., examples=["2025-07-15"])
    checkout_date: date = Field(..., examples=["2025-07-20"])


class Reservation(ReservationPayload):
    id: int


class ReservationDetail(Reservation):
    """A reservation with its guest and campsite (plus type) nested, never the reverse."""

    user_profile: UserProfile
    campsite: CampsiteDetail
