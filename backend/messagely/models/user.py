"""User model."""
from datetime import datetime
from sqlalchemy import Column, String
from messagely.database import Base, Timestamp

USERNAME_LENGTH = 255
NAME_LENGTH = 255
PHONE_LENGTH = 50


class User(Base):
    """Registered user of the site."""
    
    __tablename__ = "users"
    
    username = Column(String(USERNAME_LENGTH), primary_key=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    first_name = Column(String(NAME_LENGTH), nullable=False)
    last_name = Column(String(NAME_LENGTH), nullable=False)
    phone = Column(String(PHONE_LENGTH), nullable=False)
    join_at = Column(Timestamp, nullable=False, default=datetime.utcnow)
    last_login_at = Column(Timestamp, nullable=True)
    
    def __repr__(self):
        return f"<User(username={self.username})>"
