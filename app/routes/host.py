from typing import List

from fastapi import APIRouter, Depends

from app.db.authUtils import AuthenticatedUser
from app.db.bookingService import getHostBookings, getHostDashboard
from app.db.storageGateway import StorageGateway
from app.routes.dependencies import getCurrentUser, getGateway
from app.routes.responses import bookingFields, carResponse
from app.schemas.booking import BookingWithCarResponse
from app.schemas.car import CarResponse, HostDashboardResponse

router = APIRouter(tags=["Host"])


@router.get("/hosts/{hostId}/cars", response_model=List[CarResponse])
def getCarsByHost(hostId: int, gateway: StorageGateway = Depends(getGateway)):
    return [carResponse(c) for c in gateway.getCarsByHost(hostId)]


@router.get("/host/bookings", response_model=List[BookingWithCarResponse])
def getMyHostBookings(
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    """Bookings made on any car the acting user hosts, earliest pickup first"""
    return [
        BookingWithCarResponse(**bookingFields(booking), car=carResponse(car))
        for booking, car in getHostBookings(gateway, currentUser.id)
    ]


@router.get("/host/dashboard", response_model=HostDashboardResponse)
def getMyHostDashboard(
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    return HostDashboardResponse(**getHostDashboard(gateway, currentUser.id))
