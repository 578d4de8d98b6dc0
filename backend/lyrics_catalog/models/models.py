from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import declarative_base
from typing import Optional
from pydantic import BaseModel

Base = declarative_base()

class Song(Base):
    __tablename__ = "songs"
    # Keeps SQLite from handing out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    artist = Column(Text, nullable=False)
    lyrics = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Song(id={self.id}, title='{self.title}', artist='{self.artist}')>"

# Pydantic models for API
class SongIn(BaseModel):
    """Request body for create and update.

    Fields are optional here so that a missing title or artist reaches the
    endpoint and is answered with the catalog's own 400 message.
    """
    title: Optional[str] = None
    artist: Optional[str] = None
    lyrics: Optional[str] = None

class SongRead(BaseModel):
    id: int
    title: str
    artist: str
    lyrics: Optional[str] = None

    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
