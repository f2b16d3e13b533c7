from app.models import IndustryFrequency
from factories import BUSINESS_ID, add_industry

BASE = "/api/industry-frequency"


def _payload(**overrides):
    data = {
        "business_id": BUSINESS_ID,
        "industry_id": "ind-1",
        "name": "Weekly",
        "occurrence_time": "weekly",
        "discount": 10,
    }
    data.update(overrides)
    return data


def test_create_applies_defaults_and_trims(client, db):
    add_industry(db)
    res = client.post(f"{BASE}/", json=_payload(name="  Weekly ", description=" every week "))
    assert res.status_code == 201
    body = res.json()["frequency"]
    assert body["name"] == "Weekly"
    assert body["description"] == "every week"
    assert body["display"] == "Both"
    assert body["discount_type"] == "%"
    assert body["shorter_job_length"] == "no"
    assert body["frequency_discount"] == "all"
    assert body["location_ids"] == []
    assert body["is_active"] is True


def test_create_requires_core_fields(client):
    res = client.post(f"{BASE}/", json=_payload(occurrence_time=None))
    assert res.status_code == 400
    assert res.json() == {"error": "Business ID, Industry ID, Name, and Occurrence Time are required"}


def test_duplicate_name_conflicts(client, db):
    add_industry(db)
    client.post(f"{BASE}/", json=_payload())
    res = client.post(f"{BASE}/", json=_payload(name="weekly"))
    assert res.status_code == 409
    assert res.json() == {"error": "Frequency with this name already exists"}


def test_unknown_dependency_ids_rejected(client, db, provider):
    add_industry(db)
    res = client.post(f"{BASE}/", json=_payload(location_ids=["loc-x"]))
    assert res.status_code == 400
    assert res.json() == {"error": "Unknown location_ids: loc-x"}
    res = client.post(f"{BASE}/", json=_payload(extras=["extra-x"]))
    assert res.json() == {"error": "Unknown extras: extra-x"}
    res = client.post(f"{BASE}/", json=_payload(excluded_providers=["prov-1"]))
    assert res.status_code == 201


def test_list_by_industry_or_business(client, db):
    add_industry(db)
    add_industry(db, id="ind-2", name="Carpet")
    client.post(f"{BASE}/", json=_payload())
    client.post(f"{BASE}/", json=_payload(industry_id="ind-2", name="Monthly", occurrence_time="monthly"))

    assert client.get(f"{BASE}/").status_code == 400
    by_industry = client.get(f"{BASE}/", params={"industryId": "ind-2"}).json()["frequencies"]
    assert [f["name"] for f in by_industry] == ["Monthly"]
    by_business = client.get(f"{BASE}/", params={"businessId": BUSINESS_ID}).json()["frequencies"]
    assert {f["name"] for f in by_business} == {"Weekly", "Monthly"}


def test_update_rename_conflict_and_success(client, db):
    add_industry(db)
    weekly = client.post(f"{BASE}/", json=_payload()).json()["frequency"]
    monthly = client.post(f"{BASE}/", json=_payload(name="Monthly", occurrence_time="monthly")).json()["frequency"]

    assert client.put(f"{BASE}/", json={"id": monthly["id"], "name": " WEEKLY"}).status_code == 409
    res = client.put(f"{BASE}/", json={"id": weekly["id"], "name": "Weekly ", "discount": 15})
    assert res.status_code == 200
    assert res.json()["frequency"]["discount"] == 15
    assert client.put(f"{BASE}/", json={"id": "missing"}).status_code == 404


def test_soft_and_permanent_delete(client, db, Session):
    add_industry(db)
    weekly = client.post(f"{BASE}/", json=_payload()).json()["frequency"]
    monthly = client.post(f"{BASE}/", json=_payload(name="Monthly", occurrence_time="monthly")).json()["frequency"]

    assert client.delete(f"{BASE}/", params={"id": weekly["id"]}).json() == {"success": True}
    assert client.delete(f"{BASE}/", params={"id": monthly["id"], "permanent": True}).json() == {"success": True}
    assert client.get(f"{BASE}/", params={"industryId": "ind-1"}).json() == {"frequencies": []}
    with Session() as check:
        assert check.get(IndustryFrequency, weekly["id"]).is_active is False
        assert check.get(IndustryFrequency, monthly["id"]) is None
