import pytest
from pydantic import ValidationError

from src.app.core.domain.models import Client


def make_client(**overrides) -> Client:
    fields = dict(
        first_name="John",
        last_name="Doe",
        email="John.Doe@Example.com",
        address="123 Main St",
        phone="+1234567890",
        country="US",
    )
    fields.update(overrides)
    return Client(**fields)


def test_client_gets_generated_id_and_lower_case_email():
    first = make_client()
    second = make_client()

    assert first.id != second.id
    assert first.email == "john.doe@example.com"
    assert first.demonym is None


def test_update_contact_keeps_identity_and_names():
    client = make_client(middle_name="Michael")
    original_id = client.id

    client.update_contact(email="NEW@example.com", address="1 New St", phone="+2", country="CA")

    assert client.id == original_id
    assert client.first_name == "John"
    assert client.middle_name == "Michael"
    assert client.email == "new@example.com"
    assert client.country == "CA"


def test_update_contact_validates_country_length():
    client = make_client()

    with pytest.raises(ValidationError):
        client.update_contact(email="john.doe@example.com", address="x", phone="y", country="C")


def test_enrich_keeps_previous_demonym_when_lookup_failed():
    client = make_client(demonym="American")

    client.enrich(None)
    assert client.demonym == "American"

    client.enrich("Canadian")
    assert client.demonym == "Canadian"
