"""Pydantic schemas for request/response models."""
from messagely.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    TokenPayload,
)
from messagely.schemas.user import (
    UserBasic,
    UserDetail,
    UserListResponse,
    UserDetailResponse,
    SentMessage,
    ReceivedMessage,
    SentMessageListResponse,
    ReceivedMessageListResponse,
)

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "TokenPayload",
    "UserBasic",
    "UserDetail",
    "UserListResponse",
    "UserDetailResponse",
    "SentMessage",
    "ReceivedMessage",
    "SentMessageListResponse",
    "ReceivedMessageListResponse",
]
