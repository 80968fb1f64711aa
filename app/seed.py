# app/seed.py
import logging
from typing import List

from sqlalchemy.orm import Session

from app import crud, models, schemas
from app.config import LOG_LEVEL
from app.database import SessionLocal, init_db

logger = logging.getLogger(__name__)

SAMPLE_CONTACTS = [
    {"name": "Alice Wonder", "phone": "13800000001", "country": "USA", "province": "CA", "city": "San Francisco", "street": "Market St"},
    {"name": "MZ RME", "phone": "13800000002", "country": "USA", "province": "NY", "city": "New York", "street": "5th Ave"},
    {"name": "Grace Lee", "phone": "13800000003", "country": "Canada", "province": "ON", "city": "Toronto", "street": "King St"},
]


def seed_contacts(db: Session) -> List[models.Contact]:
    """
    Додає демонстраційні контакти до бази даних.

    Args:
        db (Session): Сесія бази даних.

    Returns:
        List[models.Contact]: Створені контакти.
    """
    return [crud.create_contact(db, schemas.ContactCreate(**sample)) for sample in SAMPLE_CONTACTS]


def list_contacts_by_id(db: Session) -> List[models.Contact]:
    """
    Повертає всі контакти в порядку їх створення (за id).

    Args:
        db (Session): Сесія бази даних.

    Returns:
        List[models.Contact]: Список контактів.
    """
    return db.query(models.Contact).order_by(models.Contact.id).all()


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL)
    init_db()
    db = SessionLocal()
    try:
        created = seed_contacts(db)
        logger.info("Seed complete: %d contacts added, %d in total", len(created), len(crud.get_contacts(db)))
    finally:
        db.close()


def verify() -> None:
    """Виводить у лог кількість контактів і всі записи бази."""
    logging.basicConfig(level=LOG_LEVEL)
    init_db()
    db = SessionLocal()
    try:
        contacts = list_contacts_by_id(db)
        logger.info("Contacts in database: %d", len(contacts))
        for contact in contacts:
            logger.info("%s | %s | %s | %s", contact.id, contact.name, contact.phone, contact.address)
    finally:
        db.close()


if __name__ == "__main__":
    main()
