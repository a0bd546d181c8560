from datetime import timedelta

import pytest

from app.db.authUtils import AuthenticatedUser
from app.db.errors import ForbiddenError, NotFoundError, TransitionError, ValidationError
from app.db.verificationUtils import rollUpVerificationStatus, updateDocumentStatus, uploadDocument
from app.models.verificationDocument import VerificationDocument


def docs(*pairs):
    return [VerificationDocument(document_type=t, status=s) for t, s in pairs]


@pytest.mark.parametrize("documents, expected", [
    ([], "unverified"),
    (docs(("id_front", "pending")), "pending"),
    (docs(("id_front", "verified"), ("id_back", "verified")), "pending"),
    (docs(("id_front", "verified"), ("id_back", "verified"), ("selfie", "verified")), "verified"),
    (docs(("id_front", "verified"), ("id_back", "failed"), ("selfie", "verified")), "failed"),
    (docs(("id_front", "verified"), ("id_back", "verified"), ("selfie", "verified"), ("license", "failed")), "verified"),
])
def test_roll_up(documents, expected):
    assert rollUpVerificationStatus(documents) == expected


def test_upload_rejects_unknown_type(gateway, makeUser):
    user = makeUser(verified=False)
    with pytest.raises(ValidationError) as exc:
        uploadDocument(gateway, user, "passport", "https://files/p.jpg")
    assert exc.value.field == "documentType"


def test_upload_rejects_blank_url(gateway, makeUser):
    user = makeUser(verified=False)
    with pytest.raises(ValidationError) as exc:
        uploadDocument(gateway, user, "selfie", "   ")
    assert exc.value.field == "fileUrl"


def test_upload_marks_user_pending(gateway, makeUser):
    user = makeUser(verified=False)
    uploadDocument(gateway, user, "selfie", "https://files/s.jpg")
    assert gateway.getUser(user.id).verification_status == "pending"


def test_review_rules(gateway, makeUser):
    owner = makeUser(verified=False)
    reviewer = AuthenticatedUser.fromModel(makeUser())
    document = uploadDocument(gateway, owner, "selfie", "https://files/s.jpg")

    with pytest.raises(NotFoundError):
        updateDocumentStatus(gateway, reviewer, 999, "completed")

    with pytest.raises(ForbiddenError):
        updateDocumentStatus(gateway, AuthenticatedUser.fromModel(owner), document.id, "completed")

    # pending documents must be completed before a verdict
    with pytest.raises(TransitionError):
        updateDocumentStatus(gateway, reviewer, document.id, "verified")

    updateDocumentStatus(gateway, reviewer, document.id, "completed")
    failed = updateDocumentStatus(gateway, reviewer, document.id, "failed")

    assert failed.failure_reason == "Document could not be verified"
    assert gateway.getUser(owner.id).verification_status == "failed"

    with pytest.raises(TransitionError):
        updateDocumentStatus(gateway, reviewer, document.id, "verified")


def test_verification_flow_unlocks_booking(client, makeUser, makeCar, authHeaders, tomorrowMorning):
    car = makeCar(makeUser())
    renter = makeUser(verified=False)
    reviewer = makeUser()
    booking = {
        "carId": car.id,
        "startDate": tomorrowMorning.isoformat(),
        "endDate": (tomorrowMorning + timedelta(days=2)).isoformat(),
    }

    assert client.post("/bookings", json=booking, headers=authHeaders(renter)).status_code == 403

    for documentType in ("id_front", "id_back", "selfie"):
        uploaded = client.post(
            "/verification/upload",
            json={"documentType": documentType, "fileUrl": f"https://files/{documentType}.jpg"},
            headers=authHeaders(renter),
        )
        assert uploaded.status_code == 201
        documentId = uploaded.json()["id"]

        for status in ("completed", "verified"):
            reviewed = client.patch(
                f"/verification/{documentId}",
                json={"status": status},
                headers=authHeaders(reviewer),
            )
            assert reviewed.status_code == 200
            assert reviewed.json()["status"] == status

    summary = client.get("/verification/me", headers=authHeaders(renter)).json()
    assert summary["verificationStatus"] == "verified"
    assert summary["isVerified"] is True
    assert len(summary["documents"]) == 3

    assert client.post("/bookings", json=booking, headers=authHeaders(renter)).status_code == 201


def test_reviewing_own_document_is_forbidden(client, makeUser, authHeaders):
    user = makeUser(verified=False)
    uploaded = client.post(
        "/verification/upload",
        json={"documentType": "selfie", "fileUrl": "https://files/s.jpg"},
        headers=authHeaders(user),
    ).json()

    response = client.patch(f"/verification/{uploaded['id']}", json={"status": "completed"}, headers=authHeaders(user))
    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN"


def test_review_rejects_unknown_status(client, makeUser, authHeaders):
    user = makeUser(verified=False)
    uploaded = client.post(
        "/verification/upload",
        json={"documentType": "selfie", "fileUrl": "https://files/s.jpg"},
        headers=authHeaders(user),
    ).json()

    response = client.patch(f"/verification/{uploaded['id']}", json={"status": "pending"}, headers=authHeaders(makeUser()))
    assert response.status_code == 422
