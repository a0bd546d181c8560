import logging
from dataclasses import dataclass
from datetime import timedelta

import bcrypt
from jose import JWTError, jwt

from app.db.errors import NotAuthenticatedError
from app.db.formatUtils import utcNow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """The acting user, passed explicitly into every booking operation."""
    id: int
    username: str
    isVerified: bool

    @classmethod
    def fromModel(cls, user) -> "AuthenticatedUser":
        return cls(id=user.id, username=user.username, isVerified=bool(user.is_verified))


def hashPassword(password: str) -> str:
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def verifyPassword(password: str, passwordHash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode('utf-8'), passwordHash.encode('utf-8'))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


def createAccessToken(userId: int, settings) -> str:
    expire = utcNow() + timedelta(minutes=settings.accessTokenExpireMinutes)
    toEncode = {"sub": str(userId), "exp": expire}
    return jwt.encode(toEncode, settings.secretKey, algorithm=settings.jwtAlgorithm)


def decodeAccessToken(token: str, settings) -> int:
    """Return the user id carried by the token."""
    try:
        payload = jwt.decode(token, settings.secretKey, algorithms=[settings.jwtAlgorithm])
    except JWTError:
        raise NotAuthenticatedError("Invalid or expired token")

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise NotAuthenticatedError("Invalid token subject")
    return int(subject)
