from app.db.formatUtils import formatDuration, formatMoney
from app.schemas.booking import BookingResponse, PriceBreakdownResponse
from app.schemas.car import CarResponse
from app.schemas.message import MessageResponse
from app.schemas.user import UserResponse


def userResponse(user) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        phoneNumber=user.phone_number,
        profilePicture=user.profile_picture,
        verificationStatus=user.verification_status,
        isVerified=bool(user.is_verified),
        createdAt=user.created_at
    )


def carResponse(car) -> CarResponse:
    return CarResponse(
        id=car.id,
        hostId=car.host_id,
        make=car.make,
        model=car.model,
        year=car.year,
        type=car.type,
        dailyRate=car.daily_rate,
        currency=car.currency,
        location=car.location,
        description=car.description,
        imageUrl=car.image_url,
        features=list(car.features or []),
        rating=car.rating,
        ratingCount=car.rating_count or 0,
        available=bool(car.available),
        status=car.status,
        createdAt=car.created_at
    )


def bookingFields(booking) -> dict:
    return dict(
        id=booking.id,
        carId=booking.car_id,
        userId=booking.user_id,
        startDate=booking.start_date,
        endDate=booking.end_date,
        pickupLocation=booking.pickup_location,
        dropoffLocation=booking.dropoff_location,
        totalAmount=booking.total_amount,
        currency=booking.currency,
        paymentMethod=booking.payment_method,
        status=booking.status,
        refundPercent=booking.refund_percent,
        cancelledAt=booking.cancelled_at,
        duration=formatDuration(booking.start_date, booking.end_date),
        createdAt=booking.created_at
    )


def bookingResponse(booking) -> BookingResponse:
    return BookingResponse(**bookingFields(booking))


def priceResponse(price, currency: str) -> PriceBreakdownResponse:
    return PriceBreakdownResponse(
        **price.asDict(),
        currency=currency,
        formattedTotal=formatMoney(price.total, currency)
    )


def messageResponse(message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        senderId=message.sender_id,
        receiverId=message.receiver_id,
        content=message.content,
        read=bool(message.read),
        createdAt=message.created_at
    )
