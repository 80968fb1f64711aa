# app/models.py
from sqlalchemy import Column, Integer, String
from .database import Base

class Contact(Base):
    """
    Модель контакту.

    Attributes:
        id (int): Унікальний ідентифікатор контакту.
        name (str): Ім'я контакту.
        phone (str): Номер телефону контакту.
        country (str): Країна.
        province (str): Область або штат.
        city (str): Місто.
        street (str): Вулиця.
        address (str): Повна адреса, зібрана з country, province, city, street.
    """
    __tablename__ = "contacts"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    phone = Column(String, default="", server_default="")
    country = Column(String, default="", server_default="")
    province = Column(String, default="", server_default="")
    city = Column(String, default="", server_default="")
    street = Column(String, default="", server_default="")
    address = Column(String, default="", server_default="")
