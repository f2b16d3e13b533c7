from factories import BUSINESS_ID

BASE = "/api/admin/customers"
PARAMS = {"businessId": BUSINESS_ID}


def _create(client, **overrides):
    data = {"businessId": BUSINESS_ID, "name": "Jane Roe", "email": "jane@example.com", "phone": "555-0199"}
    data.update(overrides)
    return client.post(BASE, json=data)


def test_create_customer_defaults(client):
    res = _create(client)
    assert res.status_code == 201
    customer = res.json()["customer"]
    assert customer["id"].startswith("CUST")
    assert customer["status"] == "active"
    assert customer["joinDate"] == "2025-01-15"
    assert customer["totalBookings"] == 0
    assert customer["totalSpent"] == "$0.00"
    assert customer["emailNotifications"] is True


def test_create_customer_requires_name_and_business(client):
    assert _create(client, name=" ").json() == {"error": "Business ID and name are required"}
    assert _create(client, businessId=None).status_code == 400


def test_create_customer_with_existing_id_conflicts(client):
    assert _create(client, id="CUST1").status_code == 201
    res = _create(client, id="CUST1")
    assert res.status_code == 409
    assert res.json() == {"error": "Customer already exists"}


def test_list_and_search(client):
    _create(client, id="CUST1", name="Jane Roe")
    _create(client, id="CUST2", name="John Smith", email="john@example.com", phone="555-0200")

    listed = client.get(BASE, params=PARAMS).json()["customers"]
    assert {c["id"] for c in listed} == {"CUST1", "CUST2"}

    found = client.get(BASE, params={**PARAMS, "search": "SMITH"}).json()["customers"]
    assert [c["id"] for c in found] == ["CUST2"]
    found = client.get(BASE, params={**PARAMS, "search": "0199"}).json()["customers"]
    assert [c["id"] for c in found] == ["CUST1"]

    assert client.get(BASE).json() == {"error": "Business ID is required"}


def test_get_update_delete(client):
    _create(client, id="CUST1")
    res = client.get(f"{BASE}/CUST1", params=PARAMS)
    assert res.json()["customer"]["name"] == "Jane Roe"

    res = client.put(f"{BASE}/CUST1", params=PARAMS, json={"bookingBlocked": True, "tags": ["vip"]})
    customer = res.json()["customer"]
    assert customer["bookingBlocked"] is True
    assert customer["tags"] == ["vip"]

    assert client.delete(f"{BASE}/CUST1", params=PARAMS).json() == {"success": True}
    res = client.get(f"{BASE}/CUST1", params=PARAMS)
    assert res.status_code == 404
    assert res.json() == {"error": "Customer not found"}


def test_customer_of_other_business_not_found(client):
    _create(client, id="CUST1")
    assert client.get(f"{BASE}/CUST1", params={"businessId": "biz-2"}).status_code == 404
    assert client.put(f"{BASE}/CUST1", params={"businessId": "biz-2"}, json={"name": "x"}).status_code == 404
