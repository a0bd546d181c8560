from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import Settings, getSettings
from app.db.authUtils import AuthenticatedUser, decodeAccessToken
from app.db.database import getDb
from app.db.errors import NotAuthenticatedError
from app.db.storageGateway import StorageGateway

bearerScheme = HTTPBearer(auto_error=False)


def getGateway(db: Session = Depends(getDb)) -> StorageGateway:
    return StorageGateway(db)


def getCurrentUser(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearerScheme),
    gateway: StorageGateway = Depends(getGateway),
    settings: Settings = Depends(getSettings),
) -> AuthenticatedUser:
    """Resolve the bearer token to the acting user; there is no fallback identity."""
    if credentials is None:
        raise NotAuthenticatedError()

    userId = decodeAccessToken(credentials.credentials, settings)
    user = gateway.getUser(userId)
    if not user:
        raise NotAuthenticatedError("User no longer exists")
    return AuthenticatedUser.fromModel(user)
