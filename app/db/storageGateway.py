"""
Storage Gateway

The only persistence seam used by the booking core and the routes. Every
method either returns ORM rows (or None when a row is absent) or raises
PersistenceError after rolling the session back. There are no retries.
"""
import functools
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_, and_, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.errors import ConflictError, PersistenceError
from app.models.booking import Booking
from app.models.car import Car
from app.models.favorite import Favorite
from app.models.message import Message
from app.models.user import User
from app.models.verificationDocument import VerificationDocument

logger = logging.getLogger(__name__)


def persistence(fn):
    @functools.wraps(fn)
    def wrapper(self, *args, **kwargs):
        try:
            return fn(self, *args, **kwargs)
        except IntegrityError as e:
            self.db.rollback()
            logger.info("%s rejected by constraint: %s", fn.__name__, e.orig)
            raise ConflictError("Resource already exists")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("%s failed: %s", fn.__name__, e)
            raise PersistenceError(f"Storage operation {fn.__name__} failed") from e
    return wrapper


def _apply(row, patch: dict):
    for key, value in patch.items():
        if not hasattr(row, key):
            raise AttributeError(f"{type(row).__name__} has no field {key}")
        setattr(row, key, value)


class StorageGateway:
    def __init__(self, db: Session):
        self.db = db

    # ============================================
    # USERS
    # ============================================

    @persistence
    def getUser(self, userId: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == userId).first()

    @persistence
    def getUserByUsername(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    @persistence
    def createUser(self, data: dict) -> User:
        user = User(**data)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    @persistence
    def updateUser(self, userId: int, patch: dict) -> Optional[User]:
        user = self.db.query(User).filter(User.id == userId).first()
        if not user:
            return None
        _apply(user, patch)
        self.db.commit()
        self.db.refresh(user)
        return user

    # ============================================
    # CARS
    # ============================================

    @persistence
    def getCar(self, carId: int) -> Optional[Car]:
        return self.db.query(Car).filter(Car.id == carId).first()

    @persistence
    def getCars(
        self,
        location: Optional[str] = None,
        carType: Optional[str] = None,
        available: Optional[bool] = None,
        minRate: Optional[int] = None,
        maxRate: Optional[int] = None,
    ) -> List[Car]:
        query = self.db.query(Car)
        if location:
            query = query.filter(Car.location == location)
        if carType:
            query = query.filter(func.lower(Car.type) == carType.lower())
        if available is not None:
            query = query.filter(Car.available == available)
        if minRate is not None:
            query = query.filter(Car.daily_rate >= minRate)
        if maxRate is not None:
            query = query.filter(Car.daily_rate <= maxRate)
        return query.order_by(Car.id).all()

    @persistence
    def getCarsByHost(self, hostId: int) -> List[Car]:
        return self.db.query(Car).filter(Car.host_id == hostId).order_by(Car.id).all()

    @persistence
    def createCar(self, data: dict) -> Car:
        car = Car(**data)
        self.db.add(car)
        self.db.commit()
        self.db.refresh(car)
        return car

    @persistence
    def updateCar(self, carId: int, patch: dict) -> Optional[Car]:
        car = self.db.query(Car).filter(Car.id == carId).first()
        if not car:
            return None
        _apply(car, patch)
        self.db.commit()
        self.db.refresh(car)
        return car

    # ============================================
    # BOOKINGS
    # ============================================

    @persistence
    def getBooking(self, bookingId: int) -> Optional[Booking]:
        return self.db.query(Booking).filter(Booking.id == bookingId).first()

    @persistence
    def getBookingsByUser(self, userId: int) -> List[Booking]:
        return (
            self.db.query(Booking)
            .filter(Booking.user_id == userId)
            .order_by(Booking.start_date.desc())
            .all()
        )

    @persistence
    def getBookingsByCar(self, carId: int) -> List[Booking]:
        return (
            self.db.query(Booking)
            .filter(Booking.car_id == carId)
            .order_by(Booking.start_date)
            .all()
        )

    @persistence
    def getOverlappingBookings(self, carId: int, startDate: datetime, endDate: datetime) -> List[Booking]:
        """Non-cancelled bookings of the car that intersect [startDate, endDate)."""
        return (
            self.db.query(Booking)
            .filter(and_(
                Booking.car_id == carId,
                Booking.status != "cancelled",
                Booking.start_date < endDate,
                Booking.end_date > startDate,
            ))
            .all()
        )

    @persistence
    def createBooking(self, record: dict) -> Booking:
        booking = Booking(**record)
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)
        return booking

    @persistence
    def updateBooking(self, bookingId: int, patch: dict) -> Optional[Booking]:
        booking = self.db.query(Booking).filter(Booking.id == bookingId).first()
        if not booking:
            return None
        _apply(booking, patch)
        self.db.commit()
        self.db.refresh(booking)
        return booking

    @persistence
    def getLastBookedCarId(self, userId: int) -> Optional[int]:
        booking = (
            self.db.query(Booking)
            .filter(Booking.user_id == userId)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
            .first()
        )
        return booking.car_id if booking else None

    # ============================================
    # FAVORITES
    # ============================================

    @persistence
    def isFavoriteCar(self, userId: int, carId: int) -> bool:
        return self.db.query(Favorite).filter(
            Favorite.user_id == userId,
            Favorite.car_id == carId
        ).first() is not None

    @persistence
    def getFavoriteIds(self, userId: int) -> List[int]:
        rows = (
            self.db.query(Favorite.car_id)
            .filter(Favorite.user_id == userId)
            .order_by(Favorite.id)
            .all()
        )
        return [carId for (carId,) in rows]

    @persistence
    def getFavoriteCars(self, userId: int) -> List[Car]:
        return (
            self.db.query(Car)
            .join(Favorite, Favorite.car_id == Car.id)
            .filter(Favorite.user_id == userId)
            .order_by(Favorite.id)
            .all()
        )

    @persistence
    def createFavorite(self, userId: int, carId: int) -> Favorite:
        if self.isFavoriteCar(userId, carId):
            raise ConflictError("Car is already in favorites")
        favorite = Favorite(user_id=userId, car_id=carId)
        self.db.add(favorite)
        self.db.commit()
        self.db.refresh(favorite)
        return favorite

    @persistence
    def deleteFavorite(self, userId: int, carId: int) -> bool:
        deleted = self.db.query(Favorite).filter(
            Favorite.user_id == userId,
            Favorite.car_id == carId
        ).delete()
        self.db.commit()
        return deleted > 0

    # ============================================
    # MESSAGES
    # ============================================

    @persistence
    def getConversations(self, userId: int) -> List[dict]:
        """
        One entry per counterpart, newest conversation first, with the
        number of unread messages received from that counterpart.
        """
        messages = (
            self.db.query(Message)
            .filter(or_(Message.sender_id == userId, Message.receiver_id == userId))
            .order_by(Message.created_at.desc(), Message.id.desc())
            .all()
        )

        conversations = {}
        for message in messages:
            otherId = message.receiver_id if message.sender_id == userId else message.sender_id
            entry = conversations.get(otherId)
            if entry is None:
                entry = {"otherUserId": otherId, "lastMessage": message, "unreadCount": 0}
                conversations[otherId] = entry
            if message.receiver_id == userId and not message.read:
                entry["unreadCount"] += 1

        users = {}
        if conversations:
            users = {
                u.id: u
                for u in self.db.query(User).filter(User.id.in_(list(conversations.keys()))).all()
            }

        result = []
        for otherId, entry in conversations.items():
            other = users.get(otherId)
            if other is None:
                continue
            entry["user"] = other
            result.append(entry)
        return result

    @persistence
    def getConversationMessages(self, userId: int, otherUserId: int) -> List[Message]:
        return (
            self.db.query(Message)
            .filter(or_(
                and_(Message.sender_id == userId, Message.receiver_id == otherUserId),
                and_(Message.sender_id == otherUserId, Message.receiver_id == userId),
            ))
            .order_by(Message.created_at, Message.id)
            .all()
        )

    @persistence
    def createMessage(self, senderId: int, receiverId: int, content: str) -> Message:
        message = Message(sender_id=senderId, receiver_id=receiverId, content=content, read=False)
        self.db.add(message)
        self.db.commit()
        self.db.refresh(message)
        return message

    @persistence
    def markConversationAsRead(self, userId: int, otherUserId: int) -> int:
        updated = (
            self.db.query(Message)
            .filter(
                Message.sender_id == otherUserId,
                Message.receiver_id == userId,
                Message.read == False,  # noqa: E712
            )
            .update({Message.read: True}, synchronize_session=False)
        )
        self.db.commit()
        return updated

    # ============================================
    # VERIFICATION DOCUMENTS
    # ============================================

    @persistence
    def getVerificationDocuments(self, userId: int) -> List[VerificationDocument]:
        return (
            self.db.query(VerificationDocument)
            .filter(VerificationDocument.user_id == userId)
            .order_by(VerificationDocument.id)
            .all()
        )

    @persistence
    def getVerificationDocument(self, documentId: int) -> Optional[VerificationDocument]:
        return self.db.query(VerificationDocument).filter(VerificationDocument.id == documentId).first()

    @persistence
    def upsertVerificationDocument(self, userId: int, documentType: str, fileUrl: str) -> VerificationDocument:
        """Create the (user, type) document or replace its upload, resetting it to pending."""
        document = self.db.query(VerificationDocument).filter(
            VerificationDocument.user_id == userId,
            VerificationDocument.document_type == documentType
        ).first()

        if document:
            document.file_url = fileUrl
            document.status = "pending"
            document.failure_reason = None
        else:
            document = VerificationDocument(
                user_id=userId,
                document_type=documentType,
                file_url=fileUrl,
                status="pending"
            )
            self.db.add(document)

        self.db.commit()
        self.db.refresh(document)
        return document

    @persistence
    def updateVerificationDocument(self, documentId: int, patch: dict) -> Optional[VerificationDocument]:
        document = self.db.query(VerificationDocument).filter(VerificationDocument.id == documentId).first()
        if not document:
            return None
        _apply(document, patch)
        self.db.commit()
        self.db.refresh(document)
        return document
