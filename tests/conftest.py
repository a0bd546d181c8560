import os

# Must be set before the app modules build their engine and settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import Settings, getSettings
from app.db.authUtils import createAccessToken, hashPassword
from app.db.database import Base, getDb
from app.db.formatUtils import utcNow
from app.db.storageGateway import StorageGateway
from app.main import app
from app.models.booking import Booking
from app.models.car import Car
from app.models.user import User

PASSWORD = "password123"
PASSWORD_HASH = hashPassword(PASSWORD)


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def settings():
    return Settings(
        secretKey="test-secret",
        bookingAutoConfirm=True,
        requireIdVerification=True,
    )


@pytest.fixture
def gateway(db):
    return StorageGateway(db)


@pytest.fixture
def client(db, settings):
    def overrideGetDb():
        yield db

    app.dependency_overrides[getDb] = overrideGetDb
    app.dependency_overrides[getSettings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def makeUser(db):
    counter = {"n": 0}

    def _make(username=None, verified=True, **fields):
        counter["n"] += 1
        user = User(
            username=username or f"user{counter['n']}",
            password_hash=PASSWORD_HASH,
            verification_status="verified" if verified else "unverified",
            is_verified=verified,
            **fields
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def makeCar(db):
    def _make(host, dailyRate=85000, location="ADL", available=True, **fields):
        car = Car(
            host_id=host.id,
            make=fields.pop("make", "Mitsubishi"),
            model=fields.pop("model", "Pajero"),
            year=fields.pop("year", 2020),
            type=fields.pop("type", "SUV"),
            daily_rate=dailyRate,
            currency="FCFA",
            location=location,
            features=fields.pop("features", ["4x4", "GPS"]),
            available=available,
            **fields
        )
        db.add(car)
        db.commit()
        db.refresh(car)
        return car

    return _make


@pytest.fixture
def makeBooking(db):
    def _make(car, user, start, days=3, status="confirmed", **fields):
        booking = Booking(
            car_id=car.id,
            user_id=user.id,
            start_date=start,
            end_date=start + timedelta(days=days),
            pickup_location=car.location,
            dropoff_location=car.location,
            total_amount=fields.pop("total_amount", car.daily_rate * days),
            currency="FCFA",
            payment_method=fields.pop("payment_method", "card"),
            status=status,
            **fields
        )
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    return _make


@pytest.fixture
def authHeaders(settings):
    def _headers(user):
        return {"Authorization": f"Bearer {createAccessToken(user.id, settings)}"}

    return _headers


@pytest.fixture
def tomorrowMorning():
    tomorrow = utcNow() + timedelta(days=1)
    return tomorrow.replace(hour=10, minute=0, second=0, microsecond=0)
