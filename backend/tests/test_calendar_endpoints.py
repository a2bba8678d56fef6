from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from osc_backend.api import create_api
from osc_backend.database import CalendarEventSchema, get_session

if TYPE_CHECKING:
    from collections.abc import Generator, Iterator, Mapping
    from uuid import UUID

EVENTS_URL = "/v1/event-calendar"
MISSING_EVENT_ID = "00000000-0000-0000-0000-000000000000"


class FakeCalendarEventRepository:
    """In-memory repository used to mock database operations."""

    def __init__(
        self, session: Any
    ) -> None:  # pragma: no cover - session unused in fake repo
        self._session = session

    _store: dict[UUID, CalendarEventSchema] = {}  # noqa: RUF012

    @classmethod
    def reset(cls) -> None:
        cls._store = {}

    def get_by_id(self, event_id: UUID) -> CalendarEventSchema | None:
        return type(self)._store.get(event_id)

    def find_by_title_and_date(
        self, title: str, event_date: date
    ) -> CalendarEventSchema | None:
        return next(
            (
                event
                for event in type(self)._store.values()
                if event.title == title and event.event_date == event_date
            ),
            None,
        )

    def list_between(self, start: date, end: date) -> list[CalendarEventSchema]:
        events = [
            event
            for event in type(self)._store.values()
            if start <= event.event_date < end
        ]
        return sorted(events, key=lambda event: (event.event_date, event.title))

    def add(self, event: CalendarEventSchema) -> CalendarEventSchema:
        timestamp = datetime.now(UTC)
        event.created_at = timestamp
        event.updated_at = timestamp
        type(self)._store[event.id] = event
        return event

    def update(
        self, event: CalendarEventSchema, changes: Mapping[str, Any]
    ) -> CalendarEventSchema:
        for field, value in changes.items():
            setattr(event, field, value)
        event.updated_at = datetime.now(UTC)
        return event

    def delete(self, event: CalendarEventSchema) -> None:
        del type(self)._store[event.id]


@pytest.fixture(autouse=True)
def reset_repo() -> Iterator[None]:
    FakeCalendarEventRepository.reset()
    yield
    FakeCalendarEventRepository.reset()


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    monkeypatch.setattr(
        "osc_backend.api.services.calendar.CalendarEventRepository",
        FakeCalendarEventRepository,
    )

    app = create_api()

    def override_session() -> Generator[None, None, None]:
        yield None

    app.dependency_overrides[get_session] = override_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create(client: TestClient, **overrides: Any) -> dict[str, Any]:
    payload = {
        "title": "Sprint review",
        "description": "Demo the board",
        "eventDate": "2024-03-15",
        "eventType": "meeting",
    }
    payload.update(overrides)
    response = client.post(EVENTS_URL, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_event_success(client: TestClient) -> None:
    data = _create(client)

    assert data["title"] == "Sprint review"
    assert data["description"] == "Demo the board"
    assert data["eventDate"] == "2024-03-15"
    assert data["eventType"] == "meeting"
    assert data["marked"] is False
    assert "id" in data
    assert "createdAt" in data


def test_create_event_keeps_marked_flag(client: TestClient) -> None:
    data = _create(client, marked=True, description=None)

    assert data["marked"] is True
    assert data["description"] is None


@pytest.mark.parametrize("missing", ["title", "eventDate", "eventType"])
def test_create_event_requires_fields(client: TestClient, missing: str) -> None:
    payload = {"title": "Retro", "eventDate": "2024-03-20", "eventType": "meeting"}
    del payload[missing]

    response = client.post(EVENTS_URL, json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Invalid request"
    assert any(missing in error["loc"] for error in body["errors"])


@pytest.mark.parametrize("field", ["title", "eventType"])
def test_create_event_rejects_blank_strings(client: TestClient, field: str) -> None:
    payload = {"title": "Retro", "eventDate": "2024-03-20", "eventType": "meeting"}
    payload[field] = "   "

    response = client.post(EVENTS_URL, json=payload)

    assert response.status_code == 400


def test_create_event_accepts_iso_timestamp(client: TestClient) -> None:
    data = _create(client, eventDate="2024-03-15T10:00:00.000Z")

    assert data["eventDate"] == "2024-03-15"


def test_create_event_timestamp_uses_utc_day(client: TestClient) -> None:
    data = _create(client, eventDate="2024-03-15T23:30:00-05:00")

    assert data["eventDate"] == "2024-03-16"


def test_create_event_rejects_malformed_timestamp(client: TestClient) -> None:
    response = client.post(
        EVENTS_URL,
        json={"title": "Retro", "eventDate": "2024-03-15Tnoon", "eventType": "meeting"},
    )

    assert response.status_code == 400


def test_create_event_rejects_malformed_date(client: TestClient) -> None:
    response = client.post(
        EVENTS_URL,
        json={"title": "Retro", "eventDate": "not-a-date", "eventType": "meeting"},
    )

    assert response.status_code == 400


def test_create_event_conflict(client: TestClient) -> None:
    _create(client)

    response = client.post(
        EVENTS_URL,
        json={"title": "Sprint review", "eventDate": "2024-03-15", "eventType": "demo"},
    )

    assert response.status_code == 409
    assert response.json()["detail"] == (
        "Event with this title already exists on the same date"
    )


def test_create_event_same_title_other_day(client: TestClient) -> None:
    _create(client)

    data = _create(client, eventDate="2024-03-16")

    assert data["eventDate"] == "2024-03-16"


def test_list_events_for_month_filters_and_orders(client: TestClient) -> None:
    _create(client, title="Late", eventDate="2024-03-31")
    _create(client, title="Early", eventDate="2024-03-01")
    _create(client, title="Before", eventDate="2024-02-29")
    _create(client, title="After", eventDate="2024-04-01")
    _create(client, title="Middle", eventDate="2024-03-10")

    response = client.get(EVENTS_URL, params={"year": 2024, "month": 3})

    assert response.status_code == 200
    assert [event["title"] for event in response.json()] == [
        "Early",
        "Middle",
        "Late",
    ]


def test_list_events_for_december_includes_new_years_eve(client: TestClient) -> None:
    _create(client, title="Party", eventDate="2024-12-31")
    _create(client, title="Hangover", eventDate="2025-01-01")

    response = client.get(EVENTS_URL, params={"year": 2024, "month": 12})

    assert [event["title"] for event in response.json()] == ["Party"]


def test_list_events_empty_month(client: TestClient) -> None:
    response = client.get(EVENTS_URL, params={"year": 2030, "month": 1})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize(
    "params",
    [
        {"year": 2024},
        {"month": 3},
        {},
        {"year": 2024, "month": 13},
        {"year": 2024, "month": 0},
        {"year": "twenty", "month": 3},
    ],
)
def test_list_events_validates_query(
    client: TestClient, params: dict[str, Any]
) -> None:
    response = client.get(EVENTS_URL, params=params)

    assert response.status_code == 400


def test_get_event_not_found(client: TestClient) -> None:
    response = client.get(f"{EVENTS_URL}/{MISSING_EVENT_ID}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Event not found"


def test_update_event_applies_only_supplied_fields(client: TestClient) -> None:
    created = _create(client)

    response = client.patch(f"{EVENTS_URL}/{created['id']}", json={"marked": True})

    assert response.status_code == 200
    data = response.json()
    assert data["marked"] is True
    assert data["title"] == created["title"]
    assert data["description"] == created["description"]
    assert data["eventDate"] == created["eventDate"]
    assert data["eventType"] == created["eventType"]


def test_update_event_clears_description_with_null(client: TestClient) -> None:
    created = _create(client)

    response = client.patch(
        f"{EVENTS_URL}/{created['id']}", json={"description": None}
    )

    assert response.status_code == 200
    assert response.json()["description"] is None


def test_update_event_accepts_post(client: TestClient) -> None:
    created = _create(client)

    response = client.post(
        f"{EVENTS_URL}/{created['id']}",
        json={"eventDate": "2024-03-18", "eventType": "review"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["eventDate"] == "2024-03-18"
    assert data["eventType"] == "review"


def test_update_event_accepts_iso_timestamp(client: TestClient) -> None:
    created = _create(client)

    response = client.patch(
        f"{EVENTS_URL}/{created['id']}", json={"eventDate": "2024-03-20T10:00:00.000Z"}
    )

    assert response.status_code == 200
    assert response.json()["eventDate"] == "2024-03-20"
    assert response.json()["title"] == created["title"]


def test_update_event_empty_body(client: TestClient) -> None:
    created = _create(client)

    response = client.patch(f"{EVENTS_URL}/{created['id']}", json={})

    assert response.status_code == 400
    assert response.json()["detail"] == "No fields provided to update"


def test_update_event_empty_body_checked_before_lookup(client: TestClient) -> None:
    response = client.patch(f"{EVENTS_URL}/{MISSING_EVENT_ID}", json={})

    assert response.status_code == 400


@pytest.mark.parametrize("field", ["title", "eventDate", "marked", "eventType"])
def test_update_event_rejects_null_for_required_fields(
    client: TestClient, field: str
) -> None:
    created = _create(client)

    response = client.patch(f"{EVENTS_URL}/{created['id']}", json={field: None})

    assert response.status_code == 400


def test_update_event_not_found(client: TestClient) -> None:
    response = client.patch(f"{EVENTS_URL}/{MISSING_EVENT_ID}", json={"title": "New"})

    assert response.status_code == 404


def test_update_event_conflict(client: TestClient) -> None:
    _create(client, title="Planning")
    other = _create(client, title="Retro")

    response = client.patch(f"{EVENTS_URL}/{other['id']}", json={"title": "Planning"})

    assert response.status_code == 409


def test_update_event_keeping_own_slot_is_not_conflict(client: TestClient) -> None:
    created = _create(client)

    response = client.patch(
        f"{EVENTS_URL}/{created['id']}",
        json={"title": created["title"], "description": "Updated"},
    )

    assert response.status_code == 200
    assert response.json()["description"] == "Updated"


def test_update_event_rejects_malformed_id(client: TestClient) -> None:
    response = client.patch(f"{EVENTS_URL}/not-a-uuid", json={"title": "New"})

    assert response.status_code == 400


def test_delete_event_success(client: TestClient) -> None:
    created = _create(client)

    response = client.delete(f"{EVENTS_URL}/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"{EVENTS_URL}/{created['id']}").status_code == 404


def test_delete_event_not_found(client: TestClient) -> None:
    response = client.delete(f"{EVENTS_URL}/{MISSING_EVENT_ID}")

    assert response.status_code == 404


def test_store_failure_maps_to_500(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken_list(self: Any, start: date, end: date) -> list[CalendarEventSchema]:
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(FakeCalendarEventRepository, "list_between", broken_list)

    response = client.get(EVENTS_URL, params={"year": 2024, "month": 3})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to fetch events"}


def test_store_failure_on_create_hides_details(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken_add(self: Any, event: CalendarEventSchema) -> CalendarEventSchema:
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(FakeCalendarEventRepository, "add", broken_add)

    response = client.post(
        EVENTS_URL,
        json={"title": "Retro", "eventDate": "2024-03-20", "eventType": "meeting"},
    )

    assert response.status_code == 500
    assert "disk full" not in response.text
    assert response.json()["detail"] == "Failed to add event"
