"""Database package."""

from app.db.session import Base, SessionLocal, engine

__all__ = ["Base", "SessionLocal", "engine"]
