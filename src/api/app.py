from fastapi import FastAPI, HTTPException, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
import logging
from typing import List

from src.db.database import get_db
from src.models.campsite import Campsite, CampsiteDetail, CampsitePayload, CampsiteType
from src.models.reservation import Reservation, ReservationDetail, ReservationPayload
from src.services import campsite_service, reservation_service
from src.services.results import ErrorKind, OperationResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Creek River Campground API",
    description="Campsite inventory and reservation management",
    version="1.0.0"
)

STATUS_FOR_ERROR = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def unwrap(result: OperationResult):
    """Return the result's value or raise the HTTP error matching its kind."""
    if not result.ok:
        raise HTTPException(status_code=STATUS_FOR_ERROR[result.error], detail=result.message)
    return result.value


def created(location: str, model) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=model.model_dump(mode="json", by_alias=True),
        headers={"Location": location},
    )


@app.get("/api/campsites", response_model=List[Campsite])
def get_campsites(db: Session = Depends(get_db)):
    return unwrap(campsite_service.list_campsites(db))


@app.get("/api/campsites/{campsite_id}", response_model=CampsiteDetail)
def get_campsite(campsite_id: int, db: Session = Depends(get_db)):
    return unwrap(campsite_service.get_campsite(db, campsite_id))


@app.post("/api/campsites", response_model=Campsite, status_code=status.HTTP_201_CREATED)
def create_campsite(payload: CampsitePayload, db: Session = Depends(get_db)):
    campsite = unwrap(campsite_service.create_campsite(db, payload))
    logger.info(f"Created campsite: {campsite.nickname} (ID: {campsite.id})")
    return created(f"/api/campsites/{campsite.id}", campsite)


@app.put("/api/campsites/{campsite_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_campsite(campsite_id: int, payload: CampsitePayload, db: Session = Depends(get_db)):
    unwrap(campsite_service.update_campsite(db, campsite_id, payload))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.delete("/api/campsites/{campsite_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_campsite(campsite_id: int, db: Session = Depends(get_db)):
    unwrap(campsite_service.delete_campsite(db, campsite_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/api/campsite-types", response_model=List[CampsiteType])
def get_campsite_types(db: Session = Depends(get_db)):
    return unwrap(campsite_service.list_campsite_types(db))


@app.get("/api/reservations", response_model=List[ReservationDetail])
def get_reservations(db: Session = Depends(get_db)):
    """Reservations in check-in order, each with its guest and campsite nested."""
    return unwrap(reservation_service.list_reservations(db))


@app.get("/api/reservations/{reservation_id}", response_model=ReservationDetail)
def get_reservation(reservation_id: int, db: Session = Depends(get_db)):
    return unwrap(reservation_service.get_reservation(db, reservation_id))


@app.post("/api/reservations", response_model=Reservation, status_code=status.HTTP_201_CREATED)
def create_reservation(payload: ReservationPayload, db: Session = Depends(get_db)):
    reservation = unwrap(reservation_service.create_reservation(db, payload))
    logger.info(f"Created reservation {reservation.id} for campsite {reservation.campsite_id}")
    return created(f"/api/reservations/{reservation.id}", reservation)


@app.delete("/api/reservations/{reservation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reservation(reservation_id: int, db: Session = Depends(get_db)):
    unwrap(reservation_service.delete_reservation(db, reservation_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
