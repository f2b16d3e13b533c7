from datetime import date

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.crud import crud_booking
from app.models import AdminNotification, Booking, BookingStatus, ServiceProvider
from app.services.booking_board import (
    AssignmentNotAllowed,
    BookingBoard,
    BookingNotFound,
    BookingUpdateError,
    InvalidStatusTransition,
    booking_reference,
)
from app.services.booking_tabs import BookingTab
from factories import BUSINESS_ID, add_booking


def _board(db, **kwargs):
    board = BookingBoard(db, BUSINESS_ID, **kwargs)
    board.load()
    return board


def _fail_write(*args, **kwargs):
    raise SQLAlchemyError("connection reset")


def test_load_orders_by_date_desc_and_resolves_provider_names(db, provider):
    add_booking(db, "old", "2025-01-01", amount=None)
    add_booking(db, "new", "2025-03-01", provider_id=provider.id, assigned_provider="Stale Name")
    add_booking(db, "mid", "2025-02-01", assigned_provider="Walk-in Crew")
    add_booking(db, "elsewhere", "2025-02-02", business_id="biz-2")

    board = _board(db)
    assert [b.id for b in board.bookings] == ["new", "mid", "old"]
    assert board.get("new").assigned_provider == "Maria Lopez"
    assert board.get("mid").assigned_provider == "Walk-in Crew"
    assert board.get("old").amount == 0


def test_board_without_business_is_not_ready(db):
    add_booking(db, "B1", "2025-01-01")
    board = BookingBoard(db, None)
    assert board.load() == []
    assert not board.ready


def test_switch_business_clears_selection(db):
    add_booking(db, "B1", "2025-01-01")
    board = _board(db)
    board.select("B1")
    board.switch_business("biz-2")
    assert board.bookings == []
    assert board.selected is None


def test_change_status_mirrors_only_status(db):
    add_booking(db, "B1", "2025-01-10", customer_name="John Doe", amount=80)
    board = _board(db)
    before = board.get("B1")
    board.select("B1")

    updated = board.change_status("B1", "confirmed")

    assert updated.status == BookingStatus.CONFIRMED
    assert [b.id for b in board.bookings if b.id == "B1"] == ["B1"]
    assert updated.model_dump(exclude={"status"}) == before.model_dump(exclude={"status"})
    assert board.selected.status == BookingStatus.CONFIRMED
    db.expire_all()
    assert db.get(Booking, "B1").status == BookingStatus.CONFIRMED


def test_change_status_records_admin_notification(db):
    add_booking(db, "abc123def456", "2025-01-10")
    board = _board(db)
    board.change_status("abc123def456", BookingStatus.CANCELLED)
    note = db.query(AdminNotification).one()
    assert note.title == "Booking modified"
    assert note.description == "Booking BKDEF456 status changed to cancelled."


def test_change_status_failure_leaves_state(db, monkeypatch):
    add_booking(db, "B1", "2025-01-10")
    board = _board(db)
    monkeypatch.setattr(crud_booking, "update_booking_fields", _fail_write)

    with pytest.raises(BookingUpdateError) as excinfo:
        board.change_status("B1", "confirmed")

    assert str(excinfo.value).startswith("Failed to update booking status:")
    assert "connection reset" in str(excinfo.value)
    assert board.get("B1").status == BookingStatus.PENDING
    assert db.query(AdminNotification).count() == 0


def test_change_status_rejects_reopening_closed_booking_as_draft(db):
    add_booking(db, "B1", "2025-01-10", status=BookingStatus.COMPLETED)
    board = _board(db)
    with pytest.raises(InvalidStatusTransition, match="from completed to draft: console policy"):
        board.change_status("B1", "draft")
    assert board.get("B1").status == BookingStatus.COMPLETED


def test_change_status_unknown_value(db):
    add_booking(db, "B1", "2025-01-10")
    board = _board(db)
    with pytest.raises(ValueError):
        board.change_status("B1", "archived")
    with pytest.raises(BookingNotFound):
        board.change_status("missing", "confirmed")


def test_assign_provider_confirms_booking_and_closes_dialog(db, provider):
    add_booking(db, "B1", "2025-01-20", status=BookingStatus.PENDING)
    board = _board(db)
    board.open_assignment("B1")
    assert board.assignment_open

    updated = board.assign_provider(provider)

    assert updated.status == BookingStatus.CONFIRMED
    assert updated.provider_id == "prov-1"
    assert updated.assigned_provider == "Maria Lopez"
    assert not board.assignment_open
    assert board.bucket(BookingTab.UNASSIGNED, date(2025, 1, 15)) == []
    note = db.query(AdminNotification).one()
    assert note.title == "Booking assigned"
    assert note.description == f"Provider Maria Lopez assigned to booking {booking_reference('B1')}."


def test_assign_provider_prefers_explicit_name(db):
    add_booking(db, "B1", "2025-01-20")
    crew = ServiceProvider(id="crew", business_id=BUSINESS_ID, name="Team A", first_name="X", last_name="Y")
    db.add(crew)
    db.commit()
    board = _board(db)
    board.select("B1")
    assert board.assign_provider(crew).assigned_provider == "Team A"


def test_assign_provider_on_cancelled_booking_confirms_by_default(db, provider):
    add_booking(db, "B1", "2025-01-20", status=BookingStatus.CANCELLED)
    board = _board(db)
    board.select("B1")
    assert board.assign_provider(provider).status == BookingStatus.CONFIRMED


def test_assign_provider_on_closed_booking_can_be_refused(db, provider):
    add_booking(db, "B1", "2025-01-20", status=BookingStatus.COMPLETED)
    board = _board(db, allow_closed_assignment=False)
    board.select("B1")
    with pytest.raises(AssignmentNotAllowed):
        board.assign_provider(provider)
    assert board.get("B1").provider_id is None


def test_assign_provider_failure_keeps_dialog_open(db, provider, monkeypatch):
    add_booking(db, "B1", "2025-01-20")
    board = _board(db)
    board.open_assignment("B1")
    monkeypatch.setattr(crud_booking, "update_booking_fields", _fail_write)

    with pytest.raises(BookingUpdateError, match="^Failed to assign provider:"):
        board.assign_provider(provider)

    record = board.get("B1")
    assert record.provider_id is None
    assert record.status == BookingStatus.PENDING
    assert board.assignment_open


def test_assign_provider_requires_selection(db, provider):
    add_booking(db, "B1", "2025-01-20")
    board = _board(db)
    with pytest.raises(BookingNotFound):
        board.assign_provider(provider)


def test_notification_failure_does_not_fail_mutation(db, monkeypatch, caplog):
    add_booking(db, "B1", "2025-01-20")
    board = _board(db)

    def _boom(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("locked"))

    monkeypatch.setattr("app.crud.crud_notification.create_admin_notification", _boom)
    updated = board.change_status("B1", "confirmed")
    assert updated.status == BookingStatus.CONFIRMED
    assert any("Could not record admin notification" in r.getMessage() for r in caplog.records)
