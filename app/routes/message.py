from typing import List

from fastapi import APIRouter, Depends

from app.db.authUtils import AuthenticatedUser
from app.db.errors import NotFoundError, ValidationError
from app.db.storageGateway import StorageGateway
from app.routes.dependencies import getCurrentUser, getGateway
from app.routes.responses import messageResponse
from app.schemas.message import (
    ConversationMessageResponse,
    ConversationResponse,
    MessageCreateRequest,
    MessageResponse,
)

router = APIRouter(prefix="/messages", tags=["Message"])


@router.get("/conversations", response_model=List[ConversationResponse])
def getConversations(
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    return [
        ConversationResponse(
            userId=c["otherUserId"],
            username=c["user"].username,
            profilePicture=c["user"].profile_picture,
            unreadCount=c["unreadCount"],
            lastMessage=c["lastMessage"].content,
            lastMessageAt=c["lastMessage"].created_at
        )
        for c in gateway.getConversations(currentUser.id)
    ]


@router.get("/conversation/{userId}", response_model=List[ConversationMessageResponse])
def getConversation(
    userId: int,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    """Messages between the acting user and userId, oldest first"""
    other = gateway.getUser(userId)
    if not other:
        raise NotFoundError("User not found")
    me = gateway.getUser(currentUser.id)
    senders = {me.id: me, other.id: other}

    return [
        ConversationMessageResponse(
            **messageResponse(m).model_dump(),
            senderName=senders[m.sender_id].username,
            senderPicture=senders[m.sender_id].profile_picture
        )
        for m in gateway.getConversationMessages(currentUser.id, userId)
    ]


@router.post("", response_model=MessageResponse, status_code=201)
def sendMessage(
    request: MessageCreateRequest,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    if request.receiverId == currentUser.id:
        raise ValidationError("Cannot send a message to yourself", field="receiverId")
    if not gateway.getUser(request.receiverId):
        raise NotFoundError("Receiver not found", field="receiverId")

    content = request.content.strip()
    if not content:
        raise ValidationError("Message cannot be empty", field="content")

    message = gateway.createMessage(currentUser.id, request.receiverId, content)
    return messageResponse(message)


@router.post("/read/{userId}")
def markAsRead(
    userId: int,
    currentUser: AuthenticatedUser = Depends(getCurrentUser),
    gateway: StorageGateway = Depends(getGateway),
):
    updated = gateway.markConversationAsRead(currentUser.id, userId)
    return {"success": True, "markedRead": updated}
