import logging

from fastapi import APIRouter, Depends

from app.config import Settings, getSettings
from app.db.authUtils import createAccessToken, hashPassword, verifyPassword
from app.db.errors import ConflictError, NotAuthenticatedError
from app.db.storageGateway import StorageGateway
from app.routes.dependencies import getGateway
from app.routes.responses import userResponse
from app.schemas.user import LoginRequest, TokenResponse, UserRegisterRequest, UserResponse

router = APIRouter(prefix="/auth", tags=["Auth"])

logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserResponse, status_code=201)
def register(request: UserRegisterRequest, gateway: StorageGateway = Depends(getGateway)):
    """
    Create an account. New users start unverified and must upload
    identity documents before they can book.
    """
    if gateway.getUserByUsername(request.username):
        raise ConflictError("Username already taken", field="username")

    user = gateway.createUser({
        "username": request.username,
        "email": request.email,
        "password_hash": hashPassword(request.password),
        "phone_number": request.phoneNumber,
    })
    logger.info("Registered user %s", user.id)
    return userResponse(user)


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    gateway: StorageGateway = Depends(getGateway),
    settings: Settings = Depends(getSettings),
):
    user = gateway.getUserByUsername(request.username)
    if not user or not verifyPassword(request.password, user.password_hash):
        raise NotAuthenticatedError("Invalid username or password")

    return TokenResponse(accessToken=createAccessToken(user.id, settings), userId=user.id)
