from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class MessageCreateRequest(BaseModel):
    receiverId: int
    content: str = Field(..., min_length=1, max_length=2000)


class MessageResponse(BaseModel):
    id: int
    senderId: int
    receiverId: int
    content: str
    read: bool
    createdAt: Optional[datetime] = None


class ConversationMessageResponse(MessageResponse):
    senderName: str
    senderPicture: Optional[str] = None


class ConversationResponse(BaseModel):
    userId: int
    username: str
    profilePicture: Optional[str] = None
    unreadCount: int
    lastMessage: str
    lastMessageAt: Optional[datetime] = None
