# app/crud.py
import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session
from . import models, schemas

logger = logging.getLogger(__name__)

LOCATION_FIELDS = ("country", "province", "city", "street")
SEARCH_FIELDS = ("name", "phone", "country", "province", "city", "street", "address")
LIKE_ESCAPE = "\\"


def build_address(country: str = "", province: str = "", city: str = "", street: str = "") -> str:
    """
    Збирає адресу з частин, пропускаючи порожні.

    Args:
        country (str): Країна.
        province (str): Область або штат.
        city (str): Місто.
        street (str): Вулиця.

    Returns:
        str: Частини адреси, розділені одним пробілом.
    """
    parts = (country, province, city, street)
    return " ".join(part.strip() for part in parts if part and part.strip())


def _like_pattern(query: str) -> str:
    escaped = (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


# --- Робота з контактами ---

def get_contacts(db: Session, query: Optional[str] = None) -> List[models.Contact]:
    """
    Повертає всі контакти або лише ті, що відповідають пошуковому запиту.

    Запит шукається як підрядок без урахування регістру в імені, телефоні,
    частинах адреси та в самій адресі. Результат відсортовано за ім'ям.

    Args:
        db (Session): Сесія бази даних.
        query (str, optional): Пошуковий запит.

    Returns:
        List[models.Contact]: Список контактів.
    """
    contacts = db.query(models.Contact)
    if query:
        pattern = _like_pattern(query)
        contacts = contacts.filter(or_(
            *(getattr(models.Contact, field).ilike(pattern, escape=LIKE_ESCAPE) for field in SEARCH_FIELDS)
        ))
    return contacts.order_by(models.Contact.name, models.Contact.id).all()


def get_contact(db: Session, contact_id: int) -> Optional[models.Contact]:
    """
    Повертає контакт за його ID.

    Args:
        db (Session): Сесія бази даних.
        contact_id (int): Ідентифікатор контакту.

    Returns:
        models.Contact або None: Об'єкт контакту або None, якщо не знайдено.
    """
    return db.query(models.Contact).filter(models.Contact.id == contact_id).first()


def create_contact(db: Session, contact: schemas.ContactCreate) -> models.Contact:
    """
    Створює новий контакт.

    Args:
        db (Session): Сесія бази даних.
        contact (schemas.ContactCreate): Дані нового контакту.

    Returns:
        models.Contact: Створений контакт з присвоєним id.
    """
    data = contact.model_dump()
    db_contact = models.Contact(**data, address=build_address(*(data[field] for field in LOCATION_FIELDS)))
    db.add(db_contact)
    db.commit()
    db.refresh(db_contact)
    logger.info("Created contact %s", db_contact.id)
    return db_contact


def update_contact(db: Session, contact_id: int, contact: schemas.ContactUpdate) -> Optional[models.Contact]:
    """
    Оновлює лише передані поля контакту.

    Адреса перераховується із збережених частин, поверх яких накладено
    передані значення, тому часткове оновлення не стирає решту адреси.

    Args:
        db (Session): Сесія бази даних.
        contact_id (int): Ідентифікатор контакту.
        contact (schemas.ContactUpdate): Нові дані контакту.

    Returns:
        models.Contact або None: Оновлений контакт або None, якщо контакт не знайдено.
    """
    db_contact = get_contact(db, contact_id)
    if not db_contact:
        return None
    for key, value in contact.model_dump(exclude_unset=True).items():
        setattr(db_contact, key, value)
    db_contact.address = build_address(*((getattr(db_contact, field) or "") for field in LOCATION_FIELDS))
    db.commit()
    db.refresh(db_contact)
    logger.info("Updated contact %s", contact_id)
    return db_contact


def delete_contact(db: Session, contact_id: int) -> bool:
    """
    Видаляє контакт.

    Args:
        db (Session): Сесія бази даних.
        contact_id (int): Ідентифікатор контакту.

    Returns:
        bool: True, якщо контакт існував і був видалений, інакше False.
    """
    deleted = db.query(models.Contact).filter(models.Contact.id == contact_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info("Deleted contact %s", contact_id)
    return deleted > 0
