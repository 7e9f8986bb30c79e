"""User API routes."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from messagely.database import get_db
from messagely.schemas.user import (
    UserListResponse,
    UserDetailResponse,
    SentMessageListResponse,
    ReceivedMessageListResponse,
)
from messagely.services import user_service

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(db: AsyncSession = Depends(get_db)):
    """Get basic info on all users."""
    return UserListResponse(users=await user_service.all_users(db))


@router.get("/{username}", response_model=UserDetailResponse)
async def get_user(username: str, db: AsyncSession = Depends(get_db)):
    """Get detail of a user, including join and last login times."""
    return UserDetailResponse(user=await user_service.get_user(db, username))


@router.get("/{username}/to", response_model=ReceivedMessageListResponse)
async def get_messages_to(username: str, db: AsyncSession = Depends(get_db)):
    """
    Get messages sent to a user.
    
    Each message nests the sender as from_user.
    """
    return ReceivedMessageListResponse(messages=await user_service.messages_to(db, username))


@router.get("/{username}/from", response_model=SentMessageListResponse)
async def get_messages_from(username: str, db: AsyncSession = Depends(get_db)):
    """
    Get messages sent by a user.
    
    Each message nests the recipient as to_user.
    """
    return SentMessageListResponse(messages=await user_service.messages_from(db, username))
