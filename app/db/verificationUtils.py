"""
Identity verification rules.

Document statuses move pending → completed → verified | failed. The user's
overall status is rolled up from their documents after every change:
- every required document verified → verified (user.is_verified = True)
- any document failed              → failed
- any document uploaded            → pending
- nothing uploaded                 → unverified
"""
import logging

from app.db.errors import ForbiddenError, NotFoundError, TransitionError, ValidationError

logger = logging.getLogger(__name__)

DOCUMENT_TYPES = ("id_front", "id_back", "selfie", "license")
REQUIRED_DOCUMENT_TYPES = ("id_front", "id_back", "selfie")

DOCUMENT_TRANSITIONS = {
    "pending": ("completed",),
    "completed": ("verified", "failed"),
    "verified": (),
    "failed": (),
}


def rollUpVerificationStatus(documents) -> str:
    if not documents:
        return "unverified"

    verifiedTypes = {d.document_type for d in documents if d.status == "verified"}
    if all(t in verifiedTypes for t in REQUIRED_DOCUMENT_TYPES):
        return "verified"
    if any(d.status == "failed" for d in documents):
        return "failed"
    return "pending"


def refreshUserVerification(gateway, userId: int):
    documents = gateway.getVerificationDocuments(userId)
    status = rollUpVerificationStatus(documents)
    user = gateway.updateUser(userId, {
        "verification_status": status,
        "is_verified": status == "verified",
    })
    logger.info("User %s verification status is now %s", userId, status)
    return user


def uploadDocument(gateway, user, documentType: str, fileUrl: str):
    if documentType not in DOCUMENT_TYPES:
        raise ValidationError(
            f"Document type must be one of: {', '.join(DOCUMENT_TYPES)}",
            field="documentType",
        )
    if not fileUrl or not fileUrl.strip():
        raise ValidationError("File URL is required", field="fileUrl")

    document = gateway.upsertVerificationDocument(user.id, documentType, fileUrl.strip())
    refreshUserVerification(gateway, user.id)
    return document


def updateDocumentStatus(gateway, reviewer, documentId: int, status: str, failureReason: str = None):
    document = gateway.getVerificationDocument(documentId)
    if not document:
        raise NotFoundError("Verification document not found")

    if document.user_id == reviewer.id:
        raise ForbiddenError("You cannot review your own documents")

    if status not in DOCUMENT_TRANSITIONS.get(document.status, ()):
        raise TransitionError(f"Cannot move document from {document.status} to {status}")

    patch = {"status": status}
    if status == "failed":
        patch["failure_reason"] = failureReason or "Document could not be verified"

    document = gateway.updateVerificationDocument(documentId, patch)
    refreshUserVerification(gateway, document.user_id)
    return document
