from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

def create_db_engine(database_url: str) -> Engine:
    """Build the engine for one application instance"""
    kwargs = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        # SQLite connections are handed between FastAPI's worker threads
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # An in-memory database lives only as long as its one connection
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db(request: Request):
    """Yield a database session scoped to one request"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
