"""Database configuration, models, and session management."""

from fixmycampus.database.config import Base, get_db, init_db, make_engine, make_sessionmaker
from fixmycampus.database import models
from fixmycampus.database.store import Store, get_store

__all__ = ["Base", "get_db", "init_db", "make_engine", "make_sessionmaker", "models", "Store", "get_store"]
