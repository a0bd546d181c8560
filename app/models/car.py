from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, JSON
from app.db.database import Base
from app.db.formatUtils import utcNow


class Car(Base):
    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True)
    host_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    make = Column(String, nullable=False)
    model = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    type = Column(String, nullable=True)

    # Minor currency units, always > 0
    daily_rate = Column(Integer, nullable=False)
    currency = Column(String, nullable=False, default="FCFA")

    location = Column(String, nullable=False)
    description = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    features = Column(JSON, nullable=False, default=list)
    rating = Column(Float, nullable=True)
    rating_count = Column(Integer, default=0)

    # Soft state, cars are never deleted
    available = Column(Boolean, nullable=False, default=True)
    status = Column(String, nullable=False, default="active")  # active, pending_approval

    created_at = Column(DateTime, default=utcNow)
