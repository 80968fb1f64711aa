# app/schemas.py
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from typing import Optional

EDITABLE_FIELDS = ("name", "phone", "country", "province", "city", "street")


def _require_name(value: str) -> str:
    if not value.strip():
        raise ValueError("name must be a non-empty string")
    return value


# --- Схеми для контактів ---

class ContactCreate(BaseModel):
    """
    Схема для створення нового контакту.

    Attributes:
        name (str): Ім'я контакту, не може бути порожнім.
        phone (str): Номер телефону контакту.
        country (str): Країна.
        province (str): Область або штат.
        city (str): Місто.
        street (str): Вулиця.
    """
    name: str
    phone: str = ""
    country: str = ""
    province: str = ""
    city: str = ""
    street: str = ""

    @field_validator("phone", "country", "province", "city", "street", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _require_name(value)


class ContactUpdate(BaseModel):
    """
    Схема для часткового оновлення контакту.

    Поля, значення яких не є рядком, відкидаються ще до валідації,
    тому до бази доходять лише ті поля, які клієнт передав як текст.
    """
    name: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    province: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def keep_text_fields(cls, data):
        if not isinstance(data, dict):
            return data
        return {key: value for key, value in data.items() if key in EDITABLE_FIELDS and isinstance(value, str)}

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _require_name(value)


class ContactOut(BaseModel):
    """
    Схема для виводу даних контакту.

    Attributes:
        id (int): Унікальний ідентифікатор контакту.
        address (str): Адреса, зібрана з country, province, city, street.
    """
    id: int
    name: str
    phone: str = ""
    country: str = ""
    province: str = ""
    city: str = ""
    street: str = ""
    address: str = ""

    model_config = ConfigDict(from_attributes=True)

    @field_validator("phone", "country", "province", "city", "street", "address", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value
