from fastapi import APIRouter, Depends

from app.db.authUtils import AuthenticatedUser
from app.db.errors import NotFoundError
from app.db.storageGateway import StorageGateway
from app.routes.dependencies import getCurrentUser, getGateway
from app.routes.responses import userResponse
from app.schemas.user import PhoneUpdateRequest, ProfilePictureUpdateRequest, UserResponse

router = APIRouter(prefix="/users", tags=["User"])


@router.get("/me", response_model=UserResponse)
def getMe(
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    user = gateway.getUser(currentUser.id)
    if not user:
        raise NotFoundError("User not found")
    return userResponse(user)


@router.patch("/phone", response_model=UserResponse)
def updatePhone(
    request: PhoneUpdateRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    user = gateway.updateUser(currentUser.id, {"phone_number": request.phoneNumber.strip()})
    if not user:
        raise NotFoundError("User not found")
    return userResponse(user)


@router.patch("/profile-picture", response_model=UserResponse)
def updateProfilePicture(
    request: ProfilePictureUpdateRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    user = gateway.updateUser(currentUser.id, {"profile_picture": request.profilePicture})
    if not user:
        raise NotFoundError("User not found")
    return userResponse(user)
