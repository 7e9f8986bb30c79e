"""Message model."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from messagely.database import Base, Timestamp
from messagely.models.user import USERNAME_LENGTH


class Message(Base):
    """Message sent from one user to another."""
    
    __tablename__ = "messages"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    from_username = Column(String(USERNAME_LENGTH), ForeignKey("users.username"), nullable=False, index=True)
    to_username = Column(String(USERNAME_LENGTH), ForeignKey("users.username"), nullable=False, index=True)
    body = Column(Text, nullable=False)
    sent_at = Column(Timestamp, nullable=False, default=datetime.utcnow)
    read_at = Column(Timestamp, nullable=True)
    
    def __repr__(self):
        return f"<Message(id={self.id}, from={self.from_username}, to={self.to_username})>"
