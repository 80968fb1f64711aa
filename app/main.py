# app/main.py
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends, Path, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import schemas, crud
from app.config import CORS_ORIGINS, LOG_LEVEL
from app.database import get_db, init_db

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

CONTACT_NOT_FOUND = "Contact not found"
# Найбільше значення, яке вміщує INTEGER у SQLite та BIGINT у PostgreSQL
MAX_CONTACT_ID = 2**63 - 1


def contact_id_path():
    return Path(gt=0, le=MAX_CONTACT_ID, description="Ідентифікатор контакту")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Створює таблиці один раз під час старту застосунку."""
    init_db()
    yield


app = FastAPI(
    title="Contacts API",
    description="REST API адресної книги: список, пошук, створення, редагування та видалення контактів",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# --- Обробка помилок: усі відповіді з помилками мають текстове тіло ---

def describe_validation_errors(exc: RequestValidationError) -> str:
    """
    Формує текстовий опис помилок валідації запиту.

    Args:
        exc (RequestValidationError): Помилка валідації від FastAPI.

    Returns:
        str: Опис з переліком полів, які не пройшли перевірку.
    """
    errors = exc.errors()
    if any(error["loc"] and error["loc"][0] == "path" for error in errors):
        return "Invalid contact id"
    details = []
    for error in errors:
        if error["type"] == "json_invalid":
            field = "body"
        else:
            field = ".".join(str(part) for part in error["loc"][1:]) or "body"
        details.append(f"{field}: {error['msg']}")
    return "Invalid request body: " + "; ".join(details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = describe_validation_errors(exc)
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse("Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

# --- Ендпоінти для роботи з контактами ---

@app.get("/contacts", response_model=List[schemas.ContactOut])
@app.get("/contacts/", response_model=List[schemas.ContactOut], include_in_schema=False)
def read_contacts(q: Optional[str] = None, query: Optional[str] = None, db: Session = Depends(get_db)):
    """
    Повертає список контактів, відсортований за ім'ям, з можливістю пошуку.

    Args:
        q (str, optional): Пошуковий запит.
        query (str, optional): Синонім параметра q.
        db (Session): Сесія бази даних.

    Returns:
        List[schemas.ContactOut]: Список контактів.
    """
    return crud.get_contacts(db, q or query)


@app.get("/contacts/{contact_id}", response_model=schemas.ContactOut)
def read_contact(contact_id: int = contact_id_path(), db: Session = Depends(get_db)):
    """
    Повертає дані контакту за його ID.

    Raises:
        HTTPException: Якщо контакт не знайдено.
    """
    db_contact = crud.get_contact(db, contact_id)
    if not db_contact:
        raise HTTPException(status_code=404, detail=CONTACT_NOT_FOUND)
    return db_contact


@app.post("/contacts", response_model=schemas.ContactOut, status_code=status.HTTP_201_CREATED)
@app.post("/contacts/", response_model=schemas.ContactOut, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_contact(contact: schemas.ContactCreate, db: Session = Depends(get_db)):
    """
    Створює новий контакт.

    Args:
        contact (schemas.ContactCreate): Дані нового контакту.
        db (Session): Сесія бази даних.

    Returns:
        schemas.ContactOut: Дані створеного контакту.
    """
    return crud.create_contact(db, contact)


@app.patch("/contacts/{contact_id}", response_model=schemas.ContactOut)
def update_contact(contact: schemas.ContactUpdate, contact_id: int = contact_id_path(), db: Session = Depends(get_db)):
    """
    Частково оновлює дані контакту за заданим ID.

    Args:
        contact_id (int): Ідентифікатор контакту.
        contact (schemas.ContactUpdate): Поля, які потрібно змінити.
        db (Session): Сесія бази даних.

    Returns:
        schemas.ContactOut: Оновлені дані контакту.

    Raises:
        HTTPException: Якщо контакт не знайдено.
    """
    db_contact = crud.update_contact(db, contact_id, contact)
    if not db_contact:
        raise HTTPException(status_code=404, detail=CONTACT_NOT_FOUND)
    return db_contact


@app.delete("/contacts/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(contact_id: int = contact_id_path(), db: Session = Depends(get_db)):
    """
    Видаляє контакт за його ID.

    Raises:
        HTTPException: Якщо контакт не знайдено.
    """
    if not crud.delete_contact(db, contact_id):
        raise HTTPException(status_code=404, detail=CONTACT_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
