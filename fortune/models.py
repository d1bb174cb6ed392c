import datetime
import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.sql import func
from .db import Base
from .limits import MAX_CONTENT_LENGTH, MAX_AUTHOR_LENGTH, MAX_USERNAME_LENGTH


class VisitType(str, enum.Enum):
    PICK = "Pick"
    CREATE = "Create"


class Message(Base):
    __tablename__ = "messages"
    id = Column(Integer, primary_key=True)
    content = Column(String(MAX_CONTENT_LENGTH), nullable=False)
    author = Column(String(MAX_AUTHOR_LENGTH), nullable=False)
    creator = Column(String(MAX_USERNAME_LENGTH), index=True, nullable=False)


class Visit(Base):
    __tablename__ = "visits"
    id = Column(Integer, primary_key=True)
    username = Column(String(MAX_USERNAME_LENGTH), index=True, nullable=False)
    type = Column(
        Enum(VisitType, name="visit_type", native_enum=False,
             values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    # server-local wall clock, so "today" in /stats matches date.today()
    created = Column(DateTime, index=True, nullable=False,
                     default=datetime.datetime.now, server_default=func.now())
