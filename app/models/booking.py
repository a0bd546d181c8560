from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from app.db.database import Base
from app.db.formatUtils import utcNow


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    car_id = Column(Integer, ForeignKey("cars.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    pickup_location = Column(String, nullable=False)
    dropoff_location = Column(String, nullable=False)
    total_amount = Column(Integer, nullable=False)
    currency = Column(String, nullable=False, default="FCFA")
    payment_method = Column(String, nullable=True)

    # pending -> confirmed -> cancelled, cancelled is terminal
    status = Column(String, nullable=False, default="pending")

    # Filled in when the booking is cancelled
    refund_percent = Column(Integer, nullable=True)
    cancelled_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=utcNow)
