from typing import List

from fastapi import APIRouter, Depends

from app.db.authUtils import AuthenticatedUser
from app.db.errors import NotFoundError
from app.db.storageGateway import StorageGateway
from app.routes.dependencies import getCurrentUser, getGateway
from app.routes.responses import carResponse
from app.schemas.car import CarResponse
from app.schemas.favorite import FavoriteCreateRequest, FavoriteResponse

router = APIRouter(prefix="/favorites", tags=["Favorite"])


@router.get("", response_model=List[CarResponse])
def getFavoriteCars(
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    return [carResponse(c) for c in gateway.getFavoriteCars(currentUser.id)]


@router.get("/ids", response_model=List[int])
def getFavoriteIds(
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    return gateway.getFavoriteIds(currentUser.id)


@router.get("/check/{carId}", response_model=bool)
def isFavorite(
    carId: int,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    return gateway.isFavoriteCar(currentUser.id, carId)


@router.post("", response_model=FavoriteResponse, status_code=201)
def addFavorite(
    request: FavoriteCreateRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    if not gateway.getCar(request.carId):
        raise NotFoundError("Car not found", field="carId")

    favorite = gateway.createFavorite(currentUser.id, request.carId)
    return FavoriteResponse(
        id=favorite.id,
        userId=favorite.user_id,
        carId=favorite.car_id,
        createdAt=favorite.created_at
    )


@router.delete("/{carId}")
def removeFavorite(
    carId: int,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    removed = gateway.deleteFavorite(currentUser.id, carId)
    return {"success": True, "removed": removed}
