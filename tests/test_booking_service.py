from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.db import bookingService
from app.db.authUtils import AuthenticatedUser
from app.db.errors import NotFoundError

HOST = AuthenticatedUser(id=1, username="host", isVerified=True)


def vanishingGateway(status):
    """Gateway whose booking row disappears between the read and the write."""
    gateway = MagicMock()
    gateway.getBooking.return_value = SimpleNamespace(
        id=7, car_id=3, user_id=2, status=status, start_date=datetime(2030, 1, 10, 10, 0),
    )
    gateway.getCar.return_value = SimpleNamespace(id=3, host_id=HOST.id)
    gateway.updateBooking.return_value = None
    return gateway


def test_confirm_of_vanished_booking_is_not_found():
    with pytest.raises(NotFoundError):
        bookingService.confirmBooking(vanishingGateway("pending"), HOST, 7)


def test_cancel_of_vanished_booking_is_not_found():
    with pytest.raises(NotFoundError):
        bookingService.cancelBooking(vanishingGateway("confirmed"), HOST, 7, now=datetime(2030, 1, 1))
