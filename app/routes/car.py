import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from app.config import Settings, getSettings
from app.db.authUtils import AuthenticatedUser
from app.db.errors import ForbiddenError, NotFoundError, ValidationError
from app.db.storageGateway import StorageGateway
from app.routes.dependencies import getCurrentUser, getGateway
from app.routes.responses import carResponse
from app.schemas.car import AvailabilityRequest, CarCreateRequest, CarResponse, CarUpdateRequest

router = APIRouter(prefix="/cars", tags=["Car"])

logger = logging.getLogger(__name__)

# Request field -> column
CAR_FIELDS = {
    "make": "make",
    "model": "model",
    "year": "year",
    "type": "type",
    "dailyRate": "daily_rate",
    "location": "location",
    "description": "description",
    "imageUrl": "image_url",
    "features": "features",
}


def getOwnedCar(gateway: StorageGateway, carId: int, hostId: int):
    car = gateway.getCar(carId)
    if not car:
        raise NotFoundError("Car not found")
    if car.host_id != hostId:
        raise ForbiddenError("Only the host can change this car")
    return car


@router.get("", response_model=List[CarResponse])
def listCars(
    location: Optional[str] = None,
    type: Optional[str] = None,
    available: Optional[bool] = None,
    minRate: Optional[int] = None,
    maxRate: Optional[int] = None,
    gateway: StorageGateway = Depends(getGateway),
):
    cars = gateway.getCars(
        location=location,
        carType=type,
        available=available,
        minRate=minRate,
        maxRate=maxRate
    )
    return [carResponse(c) for c in cars]


@router.get("/{carId}", response_model=CarResponse)
def getCar(carId: int, gateway: StorageGateway = Depends(getGateway)):
    car = gateway.getCar(carId)
    if not car:
        raise NotFoundError("Car not found")
    return carResponse(car)


@router.post("", response_model=CarResponse, status_code=201)
def createCar(
    request: CarCreateRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
    settings: Settings = Depends(getSettings),
):
    """List a new car. The acting user becomes its host."""
    car = gateway.createCar({
        "host_id": currentUser.id,
        "make": request.make,
        "model": request.model,
        "year": request.year,
        "type": request.type,
        "daily_rate": request.dailyRate,
        "currency": request.currency or settings.defaultCurrency,
        "location": request.location,
        "description": request.description,
        "image_url": request.imageUrl,
        "features": request.features,
        "available": True,
        "status": "active",
    })
    logger.info("Host %s listed car %s", currentUser.id, car.id)
    return carResponse(car)


@router.patch("/{carId}", response_model=CarResponse)
def updateCar(
    carId: int,
    request: CarUpdateRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    getOwnedCar(gateway, carId, currentUser.id)

    changes = request.model_dump(exclude_unset=True)
    patch = {CAR_FIELDS[k]: v for k, v in changes.items() if v is not None}
    if not patch:
        raise ValidationError("No changes provided")

    return carResponse(gateway.updateCar(carId, patch))


@router.post("/{carId}/availability", response_model=CarResponse)
def setAvailability(
    carId: int,
    request: AvailabilityRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    getOwnedCar(gateway, carId, currentUser.id)
    return carResponse(gateway.updateCar(carId, {"available": request.available}))
