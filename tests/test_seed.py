# tests/test_seed.py
import logging

from sqlalchemy.orm import sessionmaker

from app import crud, seed
from app.database import init_db
from app.seed import SAMPLE_CONTACTS, list_contacts_by_id, seed_contacts


def test_seed_contacts(db_session):
    created = seed_contacts(db_session)
    assert len(created) == len(SAMPLE_CONTACTS)
    assert [c.name for c in crud.get_contacts(db_session)] == ["Alice Wonder", "Grace Lee", "MZ RME"]
    assert created[0].address == "USA CA San Francisco Market St"


def test_list_contacts_by_id(db_session):
    created = seed_contacts(db_session)
    assert [c.id for c in list_contacts_by_id(db_session)] == sorted(c.id for c in created)
    assert [c.name for c in list_contacts_by_id(db_session)] == ["Alice Wonder", "MZ RME", "Grace Lee"]


def test_verify_logs_count_and_rows(engine, monkeypatch, caplog):
    """
    verify виводить кількість записів і кожен контакт.
    """
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    monkeypatch.setattr(seed, "SessionLocal", TestingSessionLocal)
    monkeypatch.setattr(seed, "init_db", lambda: init_db(engine))
    db = TestingSessionLocal()
    try:
        seed_contacts(db)
    finally:
        db.close()

    with caplog.at_level(logging.INFO, logger="app.seed"):
        seed.verify()
    assert "Contacts in database: 3" in caplog.text
    assert "Grace Lee" in caplog.text
    assert "USA CA San Francisco Market St" in caplog.text
