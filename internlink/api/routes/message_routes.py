"""
Direct Message Routes

POST /messages - Send a message
GET /messages/unread/{user_id} - Unread count for a receiver
GET /messages/{user_id_1}/{user_id_2} - Conversation, oldest first
PATCH /messages/{message_id}/read - Mark as read

Plain request/response storage; no push delivery.
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from internlink.api.deps import get_storage
from internlink.db.memory import MemStorage
from internlink.schemas.schemas import (
    DirectMessageCreate, DirectMessageResponse, UnreadCountResponse, MessageResponse
)

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.post("", response_model=DirectMessageResponse, status_code=201)
async def send_message(message: DirectMessageCreate, storage: MemStorage = Depends(get_storage)):
    if not storage.get_user(message.sender_id):
        raise HTTPException(status_code=404, detail="Sender not found")

    if not storage.get_user(message.receiver_id):
        raise HTTPException(status_code=404, detail="Receiver not found")

    return storage.create_message(message.model_dump())


@router.get("/unread/{user_id}", response_model=UnreadCountResponse)
async def unread_count(user_id: int, storage: MemStorage = Depends(get_storage)):
    return UnreadCountResponse(count=storage.get_unread_messages_count(user_id))


@router.get("/{user_id_1}/{user_id_2}", response_model=List[DirectMessageResponse])
async def get_conversation(user_id_1: int, user_id_2: int, storage: MemStorage = Depends(get_storage)):
    """Messages exchanged between two users in either direction."""
    return storage.get_messages_between_users(user_id_1, user_id_2)


@router.patch("/{message_id}/read", response_model=MessageResponse)
async def mark_read(message_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.mark_message_as_read(message_id):
        raise HTTPException(status_code=404, detail="Message not found")
    return MessageResponse(message="Marked as read")
