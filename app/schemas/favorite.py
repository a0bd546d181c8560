from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class FavoriteCreateRequest(BaseModel):
    carId: int


class FavoriteResponse(BaseModel):
    id: int
    userId: int
    carId: int
    createdAt: Optional[datetime] = None
