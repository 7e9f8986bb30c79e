"""User accessor: registration, login bookkeeping and message lookups."""
import logging
from datetime import datetime
from typing import List
from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from messagely.exceptions import ConflictError, NotFoundError
from messagely.models.message import Message
from messagely.models.user import User
from messagely.schemas.auth import RegisterRequest
from messagely.services.auth_service import hash_password, verify_password

logger = logging.getLogger(__name__)

PUBLIC_USER_COLUMNS = (User.username, User.first_name, User.last_name, User.phone)


def _counterpart(row) -> dict:
    return {
        "username": row.username,
        "first_name": row.first_name,
        "last_name": row.last_name,
        "phone": row.phone,
    }


async def register(db: AsyncSession, data: RegisterRequest) -> dict:
    """
    Register a new user.
    
    Registration counts as the first login, so both join_at and
    last_login_at are set.
    
    Returns:
        {username, first_name, last_name, phone, join_at, last_login_at}
    
    Raises:
        ConflictError: username is already taken
    """
    now = datetime.utcnow()
    values = {
        "username": data.username,
        "first_name": data.first_name,
        "last_name": data.last_name,
        "phone": data.phone,
        "join_at": now,
        "last_login_at": now,
    }
    try:
        await db.execute(
            insert(User).values(password=hash_password(data.password), **values)
        )
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise ConflictError(f"Username {data.username} is already taken") from exc
    
    logger.info("Registered user %s", data.username)
    return values


async def authenticate(db: AsyncSession, username: str, password: str) -> bool:
    """Is this username/password pair valid?"""
    result = await db.execute(
        select(User.password).where(User.username == username)
    )
    hashed = result.scalar_one_or_none()
    
    if hashed is None:
        return False
    return verify_password(password, hashed)


async def update_login_timestamp(db: AsyncSession, username: str) -> None:
    """Set last_login_at for a user to now."""
    result = await db.execute(
        update(User)
        .where(User.username == username)
        .values(last_login_at=datetime.utcnow())
    )
    if result.rowcount == 0:
        await db.rollback()
        raise NotFoundError(f"Could not find user with username {username}")
    await db.commit()


async def all_users(db: AsyncSession) -> List[dict]:
    """Basic info on all users: [{username, first_name, last_name, phone}, ...]"""
    result = await db.execute(
        select(*PUBLIC_USER_COLUMNS).order_by(User.username)
    )
    return [dict(row) for row in result.mappings().all()]


async def get_user(db: AsyncSession, username: str) -> dict:
    """
    Get a user by username.
    
    Returns:
        {username, first_name, last_name, phone, join_at, last_login_at}
    
    Raises:
        NotFoundError: no user with that username
    """
    result = await db.execute(
        select(*PUBLIC_USER_COLUMNS, User.join_at, User.last_login_at)
        .where(User.username == username)
    )
    row = result.mappings().one_or_none()
    if row is None:
        raise NotFoundError(f"Could not find user with username {username}")
    return dict(row)


async def messages_from(db: AsyncSession, username: str) -> List[dict]:
    """
    Messages sent by a user.
    
    Returns:
        [{id, to_user, body, sent_at, read_at}, ...] where to_user is
        {username, first_name, last_name, phone}
    """
    result = await db.execute(
        select(Message.id, Message.body, Message.sent_at, Message.read_at, *PUBLIC_USER_COLUMNS)
        .join(User, Message.to_username == User.username)
        .where(Message.from_username == username)
        .order_by(Message.id)
    )
    return [
        {
            "id": row.id,
            "to_user": _counterpart(row),
            "body": row.body,
            "sent_at": row.sent_at,
            "read_at": row.read_at,
        }
        for row in result.all()
    ]


async def messages_to(db: AsyncSession, username: str) -> List[dict]:
    """
    Messages received by a user.
    
    Returns:
        [{id, from_user, body, sent_at, read_at}, ...] where from_user is
        {username, first_name, last_name, phone}
    """
    result = await db.execute(
        select(Message.id, Message.body, Message.sent_at, Message.read_at, *PUBLIC_USER_COLUMNS)
        .join(User, Message.from_username == User.username)
        .where(Message.to_username == username)
        .order_by(Message.id)
    )
    return [
        {
            "id": row.id,
            "from_user": _counterpart(row),
            "body": row.body,
            "sent_at": row.sent_at,
            "read_at": row.read_at,
        }
        for row in result.all()
    ]
