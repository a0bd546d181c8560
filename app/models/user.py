from sqlalchemy import Column, Integer, String, Boolean, DateTime
from app.db.database import Base
from app.db.formatUtils import utcNow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False)
    email = Column(String, unique=True, nullable=True)
    password_hash = Column(String, nullable=False)
    phone_number = Column(String, nullable=True)
    profile_picture = Column(String, nullable=True)

    # Roll-up of the user's verification documents:
    # unverified, pending, verified, failed
    verification_status = Column(String, nullable=False, default="unverified")
    is_verified = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=utcNow)
