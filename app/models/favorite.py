from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from app.db.database import Base
from app.db.formatUtils import utcNow


class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    car_id = Column(Integer, ForeignKey("cars.id"), nullable=False)
    created_at = Column(DateTime, default=utcNow)

    __table_args__ = (
        UniqueConstraint('user_id', 'car_id', name='unique_user_favorite_car'),
    )
