from fastapi import APIRouter, Depends

from app.db.authUtils import AuthenticatedUser
from app.db.storageGateway import StorageGateway
from app.db.verificationUtils import REQUIRED_DOCUMENT_TYPES, updateDocumentStatus, uploadDocument
from app.routes.dependencies import getCurrentUser, getGateway
from app.schemas.verification import (
    DocumentStatusUpdateRequest,
    DocumentUploadRequest,
    VerificationDocumentResponse,
    VerificationStatusResponse,
)

router = APIRouter(prefix="/verification", tags=["Verification"])


def documentResponse(document) -> VerificationDocumentResponse:
    return VerificationDocumentResponse(
        id=document.id,
        documentType=document.document_type,
        fileUrl=document.file_url,
        status=document.status,
        failureReason=document.failure_reason,
        updatedAt=document.updated_at
    )


@router.get("/me", response_model=VerificationStatusResponse)
def getMyVerification(
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    user = gateway.getUser(currentUser.id)
    return VerificationStatusResponse(
        userId=user.id,
        verificationStatus=user.verification_status,
        isVerified=bool(user.is_verified),
        requiredDocuments=list(REQUIRED_DOCUMENT_TYPES),
        documents=[documentResponse(d) for d in gateway.getVerificationDocuments(user.id)]
    )


@router.post("/upload", response_model=VerificationDocumentResponse, status_code=201)
def upload(
    request: DocumentUploadRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    """
    Register an uploaded identity document (the file itself is stored
    by the upload service; only its URL arrives here). Uploading the
    same document type again replaces it and resets it to pending.
    """
    return documentResponse(uploadDocument(gateway, currentUser, request.documentType, request.fileUrl))


@router.patch("/{documentId}", response_model=VerificationDocumentResponse)
def review(
    documentId: int,
    request: DocumentStatusUpdateRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    """Advance a document: pending → completed → verified | failed"""
    document = updateDocumentStatus(gateway, currentUser, documentId, request.status.value, request.failureReason)
    return documentResponse(document)
