"""API tests for event and booking endpoints."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from gearbook.api.dependencies import (
    get_book_equipment_use_case,
    get_book_store,
    get_create_event_use_case,
    get_evt_store,
    get_packing_list_use_case,
    get_remove_booking_use_case,
    get_update_booking_use_case,
    get_update_event_use_case,
)
from gearbook.api.main import app
from gearbook.application.use_cases import (
    BookEquipmentUseCase,
    CreateEventUseCase,
    GetPackingListUseCase,
    RemoveBookingUseCase,
    UpdateBookingUseCase,
    UpdateEventUseCase,
)
from gearbook.core.entities import Availability, EventHistoryEntry
from gearbook.core.services import AvailabilityService


@pytest.fixture
def event_store(sample_event):
    store = AsyncMock()
    store.get_event.return_value = sample_event
    store.create_event.side_effect = lambda e: e.model_copy(update={"id": 12})
    store.update_event.side_effect = lambda e: e
    store.list_history.return_value = [
        EventHistoryEntry(id=1, event_id=10, action="created", detail='Event "Sommerfest" erstellt')
    ]
    return store


@pytest.fixture
def catalog_store(sample_item):
    store = AsyncMock()
    store.get_item.return_value = sample_item
    return store


@pytest.fixture
def booking_store(sample_line):
    store = AsyncMock()
    store.get_line.return_value = sample_line
    store.list_lines.return_value = [sample_line]
    store.create_line.side_effect = lambda line, window, detail: line.model_copy(
        update={"id": 101, "item_name": "CDJ-3000", "category": "DJ"}
    )
    store.update_line.side_effect = lambda line: line
    store.delete_line.return_value = True
    return store


@pytest.fixture
def availability_service():
    service = AsyncMock(spec=AvailabilityService)
    service.check_item.return_value = Availability(
        item_id=1, name="CDJ-3000", quantity=4, in_repair=0, usable=4, booked=2, available=2
    )
    return service


@pytest.fixture
async def events_client(event_store, catalog_store, booking_store, availability_service):
    overrides = {
        get_evt_store: lambda: event_store,
        get_book_store: lambda: booking_store,
        get_create_event_use_case: lambda: CreateEventUseCase(event_store=event_store),
        get_update_event_use_case: lambda: UpdateEventUseCase(event_store=event_store),
        get_book_equipment_use_case: lambda: BookEquipmentUseCase(
            event_store=event_store,
            catalog_store=catalog_store,
            booking_store=booking_store,
            availability_service=availability_service,
        ),
        get_update_booking_use_case: lambda: UpdateBookingUseCase(booking_store=booking_store),
        get_remove_booking_use_case: lambda: RemoveBookingUseCase(booking_store=booking_store),
        get_packing_list_use_case: lambda: GetPackingListUseCase(
            booking_store=booking_store, event_store=event_store
        ),
    }
    app.dependency_overrides.update(overrides)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    for dependency in overrides:
        app.dependency_overrides.pop(dependency, None)


class TestEventsAPI:
    async def test_create(self, events_client: AsyncClient):
        response = await events_client.post(
            "/api/events",
            json={"title": "Hochzeit", "event_date": "2025-06-07"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 12
        assert data["status"] == "angefragt"

    async def test_invalid_dates_are_400(self, events_client: AsyncClient):
        response = await events_client.post(
            "/api/events",
            json={"title": "x", "setup_date": "2025-06-08", "teardown_date": "2025-06-07"},
        )
        assert response.status_code == 400

    async def test_get_missing_is_404(self, events_client: AsyncClient, event_store):
        event_store.get_event.return_value = None
        response = await events_client.get("/api/events/99")
        assert response.status_code == 404
        assert response.json()["error_code"] == "EVENT_NOT_FOUND"

    async def test_close(self, events_client: AsyncClient):
        response = await events_client.patch(
            "/api/events/10", json={"status": "abgeschlossen"}
        )
        assert response.status_code == 200
        assert response.json()["status"] == "abgeschlossen"

    async def test_history(self, events_client: AsyncClient):
        response = await events_client.get("/api/events/10/history")
        assert response.status_code == 200
        assert response.json()[0]["action"] == "created"


class TestBookingAPI:
    async def test_book_returns_201(self, events_client: AsyncClient, booking_store):
        response = await events_client.post(
            "/api/events/10/inventory-items",
            json={"inventory_item_id": 1, "quantity": 2, "rental_days": 2},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 101
        assert data["unit_price"] == 50.0
        assert booking_store.create_line.await_args.args[2] == "2× CDJ-3000 added for 2 days"

    async def test_overbooking_is_409(self, events_client: AsyncClient, booking_store):
        response = await events_client.post(
            "/api/events/10/inventory-items",
            json={"inventory_item_id": 1, "quantity": 3},
        )
        assert response.status_code == 409
        data = response.json()
        assert data["error_code"] == "OVERBOOKING_CONFLICT"
        assert data["details"]["needed"] == 3
        assert data["details"]["available"] == 2
        booking_store.create_line.assert_not_awaited()

    async def test_zero_quantity_is_400(self, events_client: AsyncClient):
        response = await events_client.post(
            "/api/events/10/inventory-items",
            json={"inventory_item_id": 1, "quantity": 0},
        )
        assert response.status_code == 400

    async def test_list(self, events_client: AsyncClient):
        response = await events_client.get("/api/events/10/inventory-items")
        assert response.status_code == 200
        assert response.json()[0]["item_name"] == "CDJ-3000"

    async def test_update_and_delete(self, events_client: AsyncClient):
        response = await events_client.put(
            "/api/events/10/inventory-items/100", json={"packed": True}
        )
        assert response.status_code == 200
        assert response.json()["packed"] is True

        response = await events_client.delete("/api/events/10/inventory-items/100")
        assert response.status_code == 204

    async def test_delete_missing_line_is_404(self, events_client: AsyncClient, booking_store):
        booking_store.get_line.return_value = None
        response = await events_client.delete("/api/events/10/inventory-items/7")
        assert response.status_code == 404
        assert response.json()["error_code"] == "BOOKING_LINE_NOT_FOUND"

    async def test_packing_list(self, events_client: AsyncClient):
        response = await events_client.get("/api/events/10/packing-list")
        assert response.status_code == 200
        assert response.json()["summary"] == {"total": 1, "packed": 0, "unpacked": 1}
