# app/database.py
import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import DATABASE_URL

logger = logging.getLogger(__name__)


def create_db_engine(url: str, **kwargs) -> Engine:
    """
    Створює рушій бази даних для заданого URL.

    Args:
        url (str): SQLAlchemy URL бази даних.
        **kwargs: Додаткові параметри для create_engine.

    Returns:
        Engine: Рушій бази даних.
    """
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, **kwargs)


# Створення рушія бази даних
engine = create_db_engine(DATABASE_URL)

# Фабрика сесій для роботи з базою даних
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Базовий клас для моделей SQLAlchemy
Base = declarative_base()


def init_db(bind: Engine = engine) -> None:
    """
    Створює таблиці, якщо їх ще немає. Повторний виклик нічого не змінює.

    Args:
        bind (Engine): Рушій бази даних.
    """
    url = bind.url
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    # Реєстрація моделей у метаданих
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready at %s", url.render_as_string(hide_password=True))


def get_db():
    """
    Забезпечує сесію бази даних для обробки запитів.

    Yields:
        Session: Сесія бази даних.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
