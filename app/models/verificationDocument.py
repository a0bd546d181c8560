from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from app.db.database import Base
from app.db.formatUtils import utcNow


class VerificationDocument(Base):
    """
    One uploaded identity document per (user, document type).

    Status flow:
    - pending    → uploaded, waiting to be processed
    - completed  → processed, waiting for review
    - verified / failed → review outcome

    A failed document may be uploaded again, which resets it to pending.
    """
    __tablename__ = "verification_documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    document_type = Column(String, nullable=False)  # id_front, id_back, selfie, license
    file_url = Column(String, nullable=False)
    status = Column(String, nullable=False, default="pending")
    failure_reason = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcNow)
    updated_at = Column(DateTime, default=utcNow, onupdate=utcNow)

    __table_args__ = (
        UniqueConstraint('user_id', 'document_type', name='unique_user_document_type'),
    )
