"""Authentication schemas."""
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from messagely.models.user import NAME_LENGTH, PHONE_LENGTH, USERNAME_LENGTH

# bcrypt only accepts passwords up to 72 bytes
MAX_PASSWORD_BYTES = 72


class LoginRequest(BaseModel):
    """Login request schema."""
    username: str
    password: str


class RegisterRequest(BaseModel):
    """Registration request schema."""
    username: str = Field(min_length=1, max_length=USERNAME_LENGTH)
    password: str = Field(min_length=1)
    first_name: str = Field(max_length=NAME_LENGTH)
    last_name: str = Field(max_length=NAME_LENGTH)
    phone: str = Field(max_length=PHONE_LENGTH)
    
    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
        return value


class TokenResponse(BaseModel):
    """Response carrying a signed JWT."""
    token: str


class TokenPayload(BaseModel):
    """JWT token payload."""
    username: str
    exp: datetime
