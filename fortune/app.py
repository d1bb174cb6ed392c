import datetime
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends, Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .db import get_db
from .models import Message, Visit, VisitType
from .schemas import (
    PickRequest, PickResponse,
    CreateRequest, CreateResponse,
    StatsRequest, StatsResponse,
)

logger = logging.getLogger(__name__)


class NoMessagesError(Exception):
    pass


app = FastAPI(title="Fortune Cookie API")


# Error responses carry the status code only.
@app.exception_handler(StarletteHTTPException)
async def _http_error(request, exc: StarletteHTTPException):
    return Response(status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def _validation_error(request, exc: RequestValidationError):
    logger.info("rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return Response(status_code=400)


@app.get("/health")
def health():
    return {"ok": True}


def _count_messages(db: Session, creator: Optional[str] = None) -> int:
    stmt = select(func.count()).select_from(Message)
    if creator is not None:
        stmt = stmt.where(Message.creator == creator)
    return db.scalar(stmt)


def _count_visits(db: Session, since: Optional[datetime.datetime] = None,
                  until: Optional[datetime.datetime] = None) -> int:
    stmt = select(func.count()).select_from(Visit)
    if since is not None:
        stmt = stmt.where(Visit.created >= since)
    if until is not None:
        stmt = stmt.where(Visit.created < until)
    return db.scalar(stmt)


def today_range(today: Optional[datetime.date] = None) -> tuple[datetime.datetime, datetime.datetime]:
    """Half-open [midnight today, midnight tomorrow) in server-local time."""
    today = today or datetime.date.today()
    start = datetime.datetime.combine(today, datetime.time.min)
    return start, start + datetime.timedelta(days=1)


@app.post("/pick", response_model=PickResponse)
def pick(req: PickRequest, db: Session = Depends(get_db)):
    try:
        with db.begin():
            msg = db.execute(
                select(Message).order_by(func.random()).limit(1)
            ).scalar_one_or_none()
            if msg is None:
                raise NoMessagesError("messages table is empty")
            db.add(Visit(username=req.username, type=VisitType.PICK))
            # read before commit expires the instance
            resp = PickResponse(content=msg.content, author=msg.author, creator=msg.creator)
    except (SQLAlchemyError, NoMessagesError):
        logger.exception("pick failed for %r", req.username)
        raise HTTPException(500)
    return resp


@app.post("/create", response_model=CreateResponse)
def create(req: CreateRequest, db: Session = Depends(get_db)):
    try:
        with db.begin():
            db.add(Message(content=req.content, author=req.author, creator=req.username))
            db.flush()
            all_count = _count_messages(db)
            user_count = _count_messages(db, creator=req.username)
            db.add(Visit(username=req.username, type=VisitType.CREATE))
    except SQLAlchemyError:
        logger.exception("create failed for %r", req.username)
        raise HTTPException(500)
    return CreateResponse(all_count=all_count, user_count=user_count)


@app.post("/stats", response_model=StatsResponse)
def stats(req: StatsRequest, db: Session = Depends(get_db)):
    start, end = today_range()
    try:
        return StatsResponse(
            all_count=_count_messages(db),
            user_count=_count_messages(db, creator=req.username),
            all_visits=_count_visits(db),
            today_visits=_count_visits(db, since=start, until=end),
        )
    except SQLAlchemyError:
        logger.exception("stats failed for %r", req.username)
        raise HTTPException(500)
