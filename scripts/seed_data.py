"""
Seed script to populate database with demo data for development.
Run with: python scripts/seed_data.py
"""
import sys
from datetime import timedelta
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.db.authUtils import hashPassword
from app.db.database import Base, SessionLocal, engine
from app.db.formatUtils import utcNow
from app.db.pricingEngine import computeBookingPrice
from app.models.booking import Booking
from app.models.car import Car
from app.models.favorite import Favorite
from app.models.message import Message
from app.models.user import User
from app.models.verificationDocument import VerificationDocument

DEMO_CARS = [
    ("Mitsubishi", "Pajero", 2020, "SUV", 85000, "ADL", 4.8, 12, True,
     "Powerful and comfortable SUV perfect for both city driving and off-road adventures.",
     ["4x4", "Bluetooth", "Air conditioning", "GPS", "Backup camera"]),
    ("Mercedes", "G-Wagon AMG", 2022, "Luxury", 135000, "ADL", 4.5, 8, True,
     "Luxury SUV with powerful performance and distinctive styling.",
     ["Leather seats", "Panoramic sunroof", "Premium audio", "Heated seats"]),
    ("Kia", "K5 GT", 2021, "Sedan", 65500, "ADL", 4.5, 6, True,
     "Sporty sedan with advanced features and comfortable interior.",
     ["Bluetooth", "Air conditioning", "Heated seats", "Parking sensors"]),
    ("Toyota", "Hilux", 2022, "Truck", 72000, "GBN", 4.7, 9, True,
     "Rugged pickup truck perfect for both work and adventure.",
     ["4x4", "Towing package", "Bluetooth", "Backup camera"]),
    ("BMW", "M4", 2023, "Sports", 125000, "FTN", 4.9, 7, True,
     "High-performance sports car with aggressive styling.",
     ["Sport mode", "Racing seats", "Premium audio", "Launch control"]),
    ("Honda", "Civic", 2021, "Compact", 45000, "ADL", 4.3, 15, True,
     "Fuel-efficient compact car with modern features and reliability.",
     ["Bluetooth", "Backup camera", "USB ports", "Apple CarPlay"]),
    ("Audi", "A8 L", 2022, "Luxury", 155000, "FTN", 4.8, 5, False,
     "Executive luxury sedan with premium amenities and comfortable ride.",
     ["Massage seats", "Premium audio", "Air suspension", "Night vision"]),
]

CONVERSATION = [
    ("demo", 48, "Hello, I'm interested in renting your Mitsubishi Pajero. Is it available next weekend?", True),
    ("host", 47, "Yes, it's available. When exactly do you need it?", True),
    ("demo", 46, "I need it for eight days. I'm planning a trip to the mountains.", True),
    ("host", 45, "That works for me. The rate is 85,000 FCFA per day. Where would you like to pick it up?", True),
    ("demo", 44, "The ADL pickup location is fine.", True),
    ("host", 12, "I've approved your booking! The car will be fully fueled and cleaned.", False),
    ("host", 2, "One more thing - the car has a full-size spare tire in the back.", False),
]


def clear_existing_data(db):
    """Clear every table, children first"""
    print("Clearing existing data...")
    for model in (Message, Favorite, Booking, VerificationDocument, Car, User):
        db.query(model).delete()
    db.commit()
    print("✓ Existing data cleared")


def create_users(db):
    demo = User(
        username="demo_user",
        email="demo@example.com",
        password_hash=hashPassword("password123"),
        phone_number="+123456789",
        verification_status="verified",
        is_verified=True
    )
    host = User(
        username="car_host",
        email="host@example.com",
        password_hash=hashPassword("host1234"),
        phone_number="+987654321",
        verification_status="verified",
        is_verified=True
    )
    db.add_all([demo, host])
    db.commit()

    # Demo user's documents, already reviewed
    for documentType in ("id_front", "id_back", "selfie"):
        db.add(VerificationDocument(
            user_id=demo.id,
            document_type=documentType,
            file_url=f"https://storage.example.com/demo/{documentType}.jpg",
            status="verified"
        ))
    db.commit()

    print(f"✓ Created users: demo_user (id {demo.id}), car_host (id {host.id})")
    return demo, host


def create_cars(db, host):
    cars = []
    for make, model, year, carType, rate, location, rating, ratingCount, available, description, features in DEMO_CARS:
        car = Car(
            host_id=host.id,
            make=make,
            model=model,
            year=year,
            type=carType,
            daily_rate=rate,
            currency="FCFA",
            location=location,
            description=description,
            features=features,
            rating=rating,
            rating_count=ratingCount,
            available=available,
            status="active"
        )
        db.add(car)
        cars.append(car)

    db.commit()
    print(f"✓ Created {len(cars)} cars")
    return cars


def create_booking_and_favorite(db, demo, pajero):
    start = (utcNow() + timedelta(days=14)).replace(hour=10, minute=30, second=0, microsecond=0)
    end = start + timedelta(days=8)
    price = computeBookingPrice(pajero.daily_rate, start, end)

    db.add(Booking(
        car_id=pajero.id,
        user_id=demo.id,
        start_date=start,
        end_date=end,
        pickup_location=pajero.location,
        dropoff_location=pajero.location,
        total_amount=price.total,
        currency="FCFA",
        payment_method="airtel",
        status="confirmed"
    ))
    db.add(Favorite(user_id=demo.id, car_id=pajero.id))
    db.commit()
    print(f"✓ Created booking of {pajero.make} {pajero.model} ({price.total} FCFA) and a favorite")


def create_conversation(db, demo, host):
    now = utcNow()
    for who, hoursAgo, content, read in CONVERSATION:
        sender, receiver = (demo, host) if who == "demo" else (host, demo)
        db.add(Message(
            sender_id=sender.id,
            receiver_id=receiver.id,
            content=content,
            read=read,
            created_at=now - timedelta(hours=hoursAgo)
        ))
    db.commit()
    print(f"✓ Created conversation with {len(CONVERSATION)} messages")


def main():
    print("=" * 60)
    print("SEEDING DATABASE WITH DEMO DATA")
    print("=" * 60)

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        clear_existing_data(db)
        demo, host = create_users(db)
        cars = create_cars(db, host)
        create_booking_and_favorite(db, demo, cars[0])
        create_conversation(db, demo, host)

        print("\n" + "=" * 60)
        print("✓ SEEDING COMPLETE")
        print("=" * 60)
        print("Log in as demo_user / password123 or car_host / host1234")

    except Exception as e:
        print(f"\n✗ ERROR: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
