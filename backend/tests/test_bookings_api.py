from app.models import AdminNotification, Booking, BookingStatus
from factories import BUSINESS_ID, add_booking

BASE = "/api/v1/admin/bookings"
PARAMS = {"businessId": BUSINESS_ID}


def test_list_requires_business_id(client):
    res = client.get(f"{BASE}/")
    assert res.status_code == 400
    assert res.json()["detail"]["message"] == "Business ID is required"


def test_list_accepts_business_header(client, db):
    add_booking(db, "B1", "2025-01-20")
    res = client.get(f"{BASE}/", headers={"x-business-id": BUSINESS_ID})
    assert res.status_code == 200
    assert [b["id"] for b in res.json()["bookings"]] == ["B1"]


def test_list_tab_counts_and_filters(client, db, provider):
    add_booking(db, "past", "2025-01-10")
    add_booking(db, "today", "2025-01-15", status=BookingStatus.CONFIRMED, provider_id=provider.id)
    add_booking(db, "future", "2025-02-01", status=BookingStatus.CONFIRMED, frequency="Weekly")
    add_booking(db, "quote", "2025-02-02", status=BookingStatus.QUOTE)
    add_booking(db, "gone", "2025-02-03", status=BookingStatus.CANCELLED)

    res = client.get(f"{BASE}/", params={**PARAMS, "tab": "upcoming"})
    assert res.status_code == 200
    body = res.json()
    assert body["tab"] == "upcoming"
    assert [b["id"] for b in body["bookings"]] == ["future"]
    assert body["counts"] == {
        "all": 5,
        "today": 1,
        "upcoming": 1,
        "unassigned": 2,
        "draft": 1,
        "cancelled": 1,
        "history": 1,
    }

    res = client.get(f"{BASE}/", params={**PARAMS, "frequency": "weekly"})
    assert [b["id"] for b in res.json()["bookings"]] == ["future"]

    res = client.get(f"{BASE}/", params={**PARAMS, "status": "cancelled", "search": "GON"})
    assert res.json()["total"] == 1


def test_list_serializes_provider_name_and_amount(client, db, provider):
    add_booking(db, "B1", "2025-01-20", provider_id=provider.id, amount="120.50")
    booking = client.get(f"{BASE}/B1", params=PARAMS).json()
    assert booking["assignedProvider"] == "Maria Lopez"
    assert booking["amount"] == 120.5
    assert booking["status"] == "pending"


def test_get_unknown_booking(client):
    res = client.get(f"{BASE}/nope", params=PARAMS)
    assert res.status_code == 404
    assert res.json()["detail"]["field_errors"] == {"booking_id": "not_found"}


def test_bookings_of_other_business_are_hidden(client, db):
    add_booking(db, "B1", "2025-01-20", business_id="biz-2")
    assert client.get(f"{BASE}/B1", params=PARAMS).status_code == 404


def test_calendar_defaults_to_current_month(client, db):
    add_booking(db, "a", "2025-01-15")
    add_booking(db, "b", "2025-01-15")
    add_booking(db, "c", "2025-01-15")
    body = client.get(f"{BASE}/calendar", params=PARAMS).json()
    assert (body["year"], body["month"]) == (2025, 0)
    assert body["label"] == "January 2025"
    assert body["leading_blanks"] == 3
    cell = body["days"][14]
    assert cell["date"] == "2025-01-15"
    assert cell["is_today"] is True
    assert len(cell["visible"]) == 2
    assert cell["overflow"] == 1


def test_calendar_rejects_out_of_range_month(client):
    res = client.get(f"{BASE}/calendar", params={**PARAMS, "year": 2025, "month": 12})
    assert res.status_code == 422


def test_calendar_last_supported_month(client):
    res = client.get(f"{BASE}/calendar", params={**PARAMS, "year": 9999, "month": 11})
    assert res.status_code == 200
    body = res.json()
    assert body["label"] == "December 9999"
    assert body["days_in_month"] == 31
    assert body["leading_blanks"] == 3
    assert len(body["days"]) == 31
    assert body["days"][-1]["date"] == "9999-12-31"


def test_calendar_ics_download(client, db):
    add_booking(db, "B1", "2025-01-20", time="10:00", service="Deep Clean")
    res = client.get(f"{BASE}/calendar.ics", params={**PARAMS, "year": 2025, "month": 0})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/calendar")
    assert "bookings-2025-01.ics" in res.headers["content-disposition"]
    assert "BEGIN:VCALENDAR" in res.text
    assert "B1@bookings-console" in res.text


def test_patch_status(client, db, Session):
    add_booking(db, "B1", "2025-01-20")
    res = client.patch(f"{BASE}/B1/status", params=PARAMS, json={"status": "confirmed"})
    assert res.status_code == 200
    assert res.json()["status"] == "confirmed"

    with Session() as check:
        assert check.get(Booking, "B1").status == BookingStatus.CONFIRMED
        assert check.query(AdminNotification).one().title == "Booking modified"


def test_patch_status_invalid_value(client, db):
    add_booking(db, "B1", "2025-01-20")
    res = client.patch(f"{BASE}/B1/status", params=PARAMS, json={"status": "archived"})
    assert res.status_code == 422


def test_patch_status_rejected_transition(client, db):
    add_booking(db, "B1", "2025-01-20", status=BookingStatus.CANCELLED)
    res = client.patch(f"{BASE}/B1/status", params=PARAMS, json={"status": "quote"})
    assert res.status_code == 409
    assert res.json()["detail"]["field_errors"] == {"status": "invalid_transition"}
    assert res.json()["detail"]["message"] == (
        "Cannot change booking status from cancelled to quote: "
        "console policy keeps completed and cancelled bookings out of draft and quote"
    )


def test_patch_status_unknown_booking(client):
    res = client.patch(f"{BASE}/missing/status", params=PARAMS, json={"status": "confirmed"})
    assert res.status_code == 404


def test_assign_provider(client, db, provider, Session):
    add_booking(db, "B1", "2025-01-20", status=BookingStatus.PENDING)
    res = client.post(f"{BASE}/B1/assign-provider", params=PARAMS, json={"provider_id": "prov-1"})
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "confirmed"
    assert body["provider_id"] == "prov-1"
    assert body["assignedProvider"] == "Maria Lopez"

    with Session() as check:
        row = check.get(Booking, "B1")
        assert row.assigned_provider == "Maria Lopez"
        assert row.status == BookingStatus.CONFIRMED
        assert check.query(AdminNotification).one().title == "Booking assigned"


def test_assign_unknown_provider(client, db):
    add_booking(db, "B1", "2025-01-20")
    res = client.post(f"{BASE}/B1/assign-provider", params=PARAMS, json={"provider_id": "ghost"})
    assert res.status_code == 404
    assert res.json()["detail"]["message"] == "Provider not found"


def test_assign_provider_from_other_business_is_not_found(client, db):
    add_booking(db, "B1", "2025-01-20")
    from app.models import ServiceProvider

    db.add(ServiceProvider(id="other", business_id="biz-2", name="Elsewhere"))
    db.commit()
    res = client.post(f"{BASE}/B1/assign-provider", params=PARAMS, json={"provider_id": "other"})
    assert res.status_code == 404


def test_assign_on_closed_booking_when_disallowed(client, db, provider, monkeypatch):
    from app.core.config import settings

    monkeypatch.setattr(settings, "ALLOW_ASSIGNMENT_ON_CLOSED_BOOKINGS", False)
    add_booking(db, "B1", "2025-01-20", status=BookingStatus.COMPLETED)
    res = client.post(f"{BASE}/B1/assign-provider", params=PARAMS, json={"provider_id": "prov-1"})
    assert res.status_code == 409
    assert res.json()["detail"]["field_errors"] == {"status": "closed"}
