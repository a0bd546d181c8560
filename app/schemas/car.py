from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime


class CarCreateRequest(BaseModel):
    make: str
    model: str
    year: int = Field(..., ge=1950, le=2100)
    type: Optional[str] = None
    dailyRate: int = Field(..., gt=0, description="Minor currency units per day")
    currency: Optional[str] = None
    location: str = Field(..., min_length=1)
    description: Optional[str] = None
    imageUrl: Optional[str] = None
    features: List[str] = []

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "make": "Mitsubishi",
            "model": "Pajero",
            "year": 2020,
            "type": "SUV",
            "dailyRate": 85000,
            "currency": "FCFA",
            "location": "ADL",
            "features": ["4x4", "Bluetooth", "Air conditioning"]
        }
    })


class CarUpdateRequest(BaseModel):
    """Host edits; only the provided fields change"""
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = Field(None, ge=1950, le=2100)
    type: Optional[str] = None
    dailyRate: Optional[int] = Field(None, gt=0)
    location: Optional[str] = None
    description: Optional[str] = None
    imageUrl: Optional[str] = None
    features: Optional[List[str]] = None


class AvailabilityRequest(BaseModel):
    available: bool


class CarResponse(BaseModel):
    id: int
    hostId: int
    make: str
    model: str
    year: int
    type: Optional[str] = None
    dailyRate: int
    currency: str
    location: str
    description: Optional[str] = None
    imageUrl: Optional[str] = None
    features: List[str]
    rating: Optional[float] = None
    ratingCount: int
    available: bool
    status: str
    createdAt: Optional[datetime] = None


class HostDashboardResponse(BaseModel):
    totalCars: int
    availableCars: int
    pendingBookings: int
    confirmedBookings: int
    cancelledBookings: int
    confirmedEarnings: int
