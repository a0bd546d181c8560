from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime


class UserRegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    email: Optional[EmailStr] = None
    phoneNumber: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "username": "demo_user",
            "password": "password123",
            "email": "demo@example.com",
            "phoneNumber": "+237600000000"
        }
    })


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    accessToken: str
    tokenType: str = "bearer"
    userId: int


class UserResponse(BaseModel):
    id: int
    username: str
    email: Optional[str] = None
    phoneNumber: Optional[str] = None
    profilePicture: Optional[str] = None
    verificationStatus: str
    isVerified: bool
    createdAt: Optional[datetime] = None


class PhoneUpdateRequest(BaseModel):
    phoneNumber: str = Field(..., min_length=6)


class ProfilePictureUpdateRequest(BaseModel):
    """URL of an already uploaded picture; file handling lives elsewhere"""
    profilePicture: str = Field(..., min_length=1)
