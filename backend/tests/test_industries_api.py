from factories import BUSINESS_ID, add_industry


def test_create_and_list_industries(client):
    res = client.post("/api/industries/", json={"businessId": BUSINESS_ID, "name": " Home Cleaning "})
    assert res.status_code == 201
    assert res.json()["industry"]["name"] == "Home Cleaning"

    res = client.post("/api/industries/", json={"business_id": BUSINESS_ID, "name": "Home Cleaning"})
    assert res.status_code == 409

    listed = client.get("/api/industries/", params={"business_id": BUSINESS_ID}).json()["industries"]
    assert [i["name"] for i in listed] == ["Home Cleaning"]
    assert client.get("/api/industries/").json() == {"error": "Business ID is required"}


def test_service_categories(client, db):
    add_industry(db)
    res = client.post(
        "/api/service-categories/",
        json={"businessId": BUSINESS_ID, "industryId": "ind-1", "name": "Deep Clean"},
    )
    assert res.status_code == 201
    listed = client.get("/api/service-categories/", params={"industryId": "ind-1"}).json()
    assert [c["name"] for c in listed["serviceCategories"]] == ["Deep Clean"]
    assert client.post("/api/service-categories/", json={"name": "x"}).status_code == 400


def test_form_options_collects_sibling_lists(client, db, provider):
    add_industry(db)
    add_industry(db, id="ind-2", name="Carpet")
    client.post("/api/extras/", json={"industryId": "ind-1", "name": "Oven"})
    client.post(
        "/api/industry-frequency/",
        json={"business_id": BUSINESS_ID, "industry_id": "ind-1", "name": "Weekly", "occurrence_time": "weekly"},
    )
    client.post("/api/locations/", json={"business_id": BUSINESS_ID, "name": "Downtown"})

    body = client.get("/api/industries/ind-1/form-options").json()
    assert [e["name"] for e in body["extras"]] == ["Oven"]
    assert [f["name"] for f in body["frequencies"]] == ["Weekly"]
    assert [i["id"] for i in body["industries"]] == ["ind-2"]
    assert [p["name"] for p in body["providers"]] == ["Maria Lopez"]
    assert [loc["name"] for loc in body["locations"]] == ["Downtown"]
    assert body["pricingParameters"] == []

    assert client.get("/api/industries/missing/form-options").status_code == 404
