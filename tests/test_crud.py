# tests/test_crud.py
import pytest
from app import crud, schemas


def make(db, **fields):
    return crud.create_contact(db, schemas.ContactCreate(**fields))


@pytest.fixture
def alice(db_session):
    return make(db_session, name="Alice Wonder", phone="13800000001", country="USA",
                province="CA", city="San Francisco", street="Market St")


def test_build_address_skips_blank_parts():
    assert crud.build_address("USA", "  ", "", "Market St") == "USA Market St"
    assert crud.build_address(" USA ", "CA", "San Francisco", "") == "USA CA San Francisco"
    assert crud.build_address() == ""


def test_create_contact_assigns_id_and_address(alice):
    """
    Тест створення контакту з повною адресою.
    """
    assert alice.id is not None
    assert alice.address == "USA CA San Francisco Market St"


def test_create_contact_defaults_optional_fields(db_session):
    contact = make(db_session, name="Bob")
    assert contact.phone == ""
    assert contact.country == ""
    assert contact.street == ""
    assert contact.address == ""


def test_get_contact_missing_returns_none(db_session, alice):
    assert crud.get_contact(db_session, alice.id) is not None
    assert crud.get_contact(db_session, alice.id + 1000) is None


def test_get_contacts_sorted_by_name(db_session):
    for name in ("Charlie", "Alice", "Bob"):
        make(db_session, name=name)
    assert [c.name for c in crud.get_contacts(db_session)] == ["Alice", "Bob", "Charlie"]


def test_search_matches_any_field_case_insensitive(db_session, alice):
    make(db_session, name="Grace Lee", phone="13800000003", country="Canada", province="ON", city="Toronto", street="King St")
    assert [c.name for c in crud.get_contacts(db_session, "toronto")] == ["Grace Lee"]
    assert [c.name for c in crud.get_contacts(db_session, "0001")] == ["Alice Wonder"]
    assert [c.name for c in crud.get_contacts(db_session, "ca")] == ["Alice Wonder", "Grace Lee"]
    assert crud.get_contacts(db_session, "nowhere") == []


def test_search_treats_wildcards_literally(db_session):
    make(db_session, name="Percent", street="100% Main")
    make(db_session, name="Plain", street="1000 Main")
    assert [c.name for c in crud.get_contacts(db_session, "0%")] == ["Percent"]
    assert crud.get_contacts(db_session, "_") == []


def test_update_only_supplied_fields(db_session, alice):
    updated = crud.update_contact(db_session, alice.id, schemas.ContactUpdate(phone="555"))
    assert updated.phone == "555"
    assert updated.name == "Alice Wonder"
    assert updated.address == "USA CA San Francisco Market St"


def test_update_recomputes_address_from_merged_record(db_session, alice):
    """
    Часткове оновлення міста зберігає решту частин адреси.
    """
    updated = crud.update_contact(db_session, alice.id, schemas.ContactUpdate(city="Boston"))
    assert updated.city == "Boston"
    assert updated.address == "USA CA Boston Market St"


def test_update_clearing_location_part(db_session, alice):
    updated = crud.update_contact(db_session, alice.id, schemas.ContactUpdate(province=""))
    assert updated.address == "USA San Francisco Market St"


def test_update_missing_contact_returns_none(db_session):
    assert crud.update_contact(db_session, 42, schemas.ContactUpdate(name="Nobody")) is None


def test_delete_twice(db_session, alice):
    contact_id = alice.id
    assert crud.delete_contact(db_session, contact_id) is True
    assert crud.delete_contact(db_session, contact_id) is False
    assert crud.get_contact(db_session, contact_id) is None
