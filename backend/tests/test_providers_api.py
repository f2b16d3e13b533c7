from factories import BUSINESS_ID

BASE = "/api/admin/providers"


def _payload(**overrides):
    data = {
        "firstName": " Sam ",
        "lastName": "Reyes",
        "email": "Sam@Example.com ",
        "phone": "555-0101",
        "address": "12 Elm St",
        "businessId": BUSINESS_ID,
    }
    data.update(overrides)
    return data


def test_list_requires_business(client):
    res = client.get(BASE)
    assert res.status_code == 400
    assert res.json() == {"error": "Business ID is required"}


def test_list_uses_display_names(client, provider):
    res = client.get(BASE, params={"businessId": BUSINESS_ID})
    assert res.json()["providers"] == [
        {
            "id": "prov-1",
            "name": "Maria Lopez",
            "firstName": "Maria",
            "lastName": "Lopez",
            "email": "maria@example.com",
            "phone": "555-0100",
        }
    ]


def test_create_provider_normalizes_fields(client):
    res = client.post(BASE, json=_payload())
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["provider"]["name"] == "Sam Reyes"
    assert body["provider"]["email"] == "sam@example.com"

    listed = client.get(BASE, headers={"x-business-id": BUSINESS_ID}).json()["providers"]
    assert [p["name"] for p in listed] == ["Sam Reyes"]


def test_create_provider_accepts_snake_case(client):
    res = client.post(
        BASE,
        json={
            "first_name": "Ana",
            "last_name": "Diaz",
            "email": "ana@example.com",
            "phone": "1",
            "address": "x",
            "business_id": BUSINESS_ID,
        },
    )
    assert res.status_code == 201


def test_create_provider_missing_fields(client):
    res = client.post(BASE, json=_payload(phone=""))
    assert res.status_code == 400
    assert res.json() == {"error": "Missing required fields"}


def test_create_provider_duplicate_email(client, provider):
    res = client.post(BASE, json=_payload(email="MARIA@example.com"))
    assert res.status_code == 409
    assert res.json() == {"error": "A user with this email already exists"}
