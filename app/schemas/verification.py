from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import List, Optional
from enum import Enum


class ReviewStatus(str, Enum):
    COMPLETED = "completed"
    VERIFIED = "verified"
    FAILED = "failed"


class DocumentUploadRequest(BaseModel):
    documentType: str
    fileUrl: str

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "documentType": "id_front",
            "fileUrl": "https://storage.example.com/uploads/id-front.jpg"
        }
    })


class DocumentStatusUpdateRequest(BaseModel):
    status: ReviewStatus
    failureReason: Optional[str] = None


class VerificationDocumentResponse(BaseModel):
    id: int
    documentType: str
    fileUrl: str
    status: str
    failureReason: Optional[str] = None
    updatedAt: Optional[datetime] = None


class VerificationStatusResponse(BaseModel):
    userId: int
    verificationStatus: str
    isVerified: bool
    requiredDocuments: List[str]
    documents: List[VerificationDocumentResponse]
