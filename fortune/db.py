from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

# Unbound until the server (or a test) calls bind_engine().
SessionLocal = sessionmaker(autoflush=False, autocommit=False, future=True)
Base = declarative_base()


def make_engine(url: str, **kwargs) -> Engine:
    return create_engine(url, echo=False, future=True, pool_pre_ping=True, **kwargs)


def bind_engine(engine: Engine) -> None:
    SessionLocal.configure(bind=engine)


def init_db(engine: Engine) -> None:
    # tables created in models import
    from . import models  # noqa
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
