"""User and message schemas."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class UserBasic(BaseModel):
    """Public fields of a user."""
    username: str
    first_name: str
    last_name: str
    phone: str


class UserDetail(UserBasic):
    """Public fields of a user plus account timestamps."""
    join_at: datetime
    last_login_at: Optional[datetime] = None


class UserListResponse(BaseModel):
    users: List[UserBasic]


class UserDetailResponse(BaseModel):
    user: UserDetail


class SentMessage(BaseModel):
    """Message as seen by its sender."""
    id: int
    to_user: UserBasic
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class ReceivedMessage(BaseModel):
    """Message as seen by its recipient."""
    id: int
    from_user: UserBasic
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class SentMessageListResponse(BaseModel):
    messages: List[SentMessage]


class ReceivedMessageListResponse(BaseModel):
    messages: List[ReceivedMessage]
