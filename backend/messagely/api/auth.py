"""Authentication API routes."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from messagely.database import get_db
from messagely.exceptions import InvalidCredentialsError
from messagely.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from messagely.services import auth_service, user_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Log in and update the user's last login: {username, password} => {token}."""
    if not await user_service.authenticate(db, request.username, request.password):
        logger.info("Failed login for %s", request.username)
        raise InvalidCredentialsError("Invalid username or password")
    
    await user_service.update_login_timestamp(db, request.username)
    logger.info("User %s logged in", request.username)
    return TokenResponse(token=auth_service.create_access_token(request.username))


@router.post("/register", response_model=TokenResponse)
async def register(request: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """Register and log in: {username, password, first_name, last_name, phone} => {token}."""
    user = await user_service.register(db, request)
    return TokenResponse(token=auth_service.create_access_token(user["username"]))
