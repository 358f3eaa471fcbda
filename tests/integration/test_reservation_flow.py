"""End-to-end reservation flows over HTTP against a real SQLite database."""

import asyncio
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from gearbook.api.main import app
from gearbook.application.dto.requests import BookEquipmentRequest
from gearbook.application.use_cases import BookEquipmentUseCase
from gearbook.core.exceptions import OverbookingConflictError


@pytest.fixture
async def client(db_pool):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _create_item(client: AsyncClient, name: str, quantity: int, rate: float = 50.0) -> int:
    response = await client.post(
        "/api/inventory",
        json={"name": name, "category": "DJ", "quantity": quantity, "rental_rate": rate},
    )
    assert response.status_code == 201
    return response.json()["id"]


async def _create_event(client: AsyncClient, title: str, **dates) -> int:
    response = await client.post(
        "/api/events",
        json={"title": title, "status": "bestätigt", "client_name": "Stadtwerke", **dates},
    )
    assert response.status_code == 201
    return response.json()["id"]


async def _book(client: AsyncClient, event_id: int, item_id: int, quantity: int, days: int = 1):
    return await client.post(
        f"/api/events/{event_id}/inventory-items",
        json={"inventory_item_id": item_id, "quantity": quantity, "rental_days": days},
    )


async def _available(client: AsyncClient, item_id: int, start: str, end: str) -> dict:
    response = await client.get(
        f"/api/inventory/{item_id}/availability",
        params={"date_from": start, "date_to": end},
    )
    assert response.status_code == 200
    return response.json()


class TestAvailabilityFlow:
    async def test_only_overlapping_events_count(self, client: AsyncClient):
        item_id = await _create_item(client, "CDJ-3000", 4)
        event_a = await _create_event(
            client, "Sommerfest", setup_date="2025-09-10", teardown_date="2025-09-11"
        )
        assert (await _book(client, event_a, item_id, 2)).status_code == 201

        # Shares the teardown day
        assert (await _available(client, item_id, "2025-09-11", "2025-09-11"))["available"] == 2
        assert (await _available(client, item_id, "2025-09-12", "2025-09-14"))["available"] == 4
        assert (await _available(client, item_id, "2025-09-01", "2025-09-10"))["booked"] == 2

    async def test_repair_then_restore(self, client: AsyncClient):
        item_id = await _create_item(client, "Mixer", 2)

        response = await client.post(
            f"/api/inventory/{item_id}/repairs",
            json={"quantity_affected": 1, "issue_description": "Fader kratzt"},
        )
        assert response.status_code == 201
        repair_id = response.json()["id"]

        availability = await _available(client, item_id, "2025-09-10", "2025-09-11")
        assert (availability["usable"], availability["available"]) == (1, 1)

        response = await client.put(
            f"/api/inventory/{item_id}/repairs/{repair_id}", json={"status": "repariert"}
        )
        assert response.status_code == 200
        assert response.json()["resolved_at"] is not None

        availability = await _available(client, item_id, "2025-09-10", "2025-09-11")
        assert (availability["usable"], availability["available"]) == (2, 2)


class TestOverbookingFlow:
    async def test_conflict_writes_nothing(self, client: AsyncClient):
        item_id = await _create_item(client, "CDJ-3000", 4)
        event_a = await _create_event(
            client, "Sommerfest", setup_date="2025-09-10", teardown_date="2025-09-11"
        )
        event_b = await _create_event(client, "Firmenfeier", event_date="2025-09-11")
        assert (await _book(client, event_a, item_id, 2)).status_code == 201

        response = await _book(client, event_b, item_id, 3)

        assert response.status_code == 409
        body = response.json()
        assert body["error_code"] == "OVERBOOKING_CONFLICT"
        assert body["details"]["needed"] == 3
        assert body["details"]["available"] == 2
        lines = await client.get(f"/api/events/{event_b}/inventory-items")
        assert lines.json() == []

    async def test_undated_event_is_not_checked(self, client: AsyncClient):
        item_id = await _create_item(client, "CDJ-3000", 1)
        undated = await _create_event(client, "Anfrage")

        assert (await _book(client, undated, item_id, 5)).status_code == 201

    async def test_closing_an_event_releases_its_equipment(self, client: AsyncClient):
        item_id = await _create_item(client, "CDJ-3000", 4)
        event_a = await _create_event(client, "Sommerfest", event_date="2025-09-10")
        event_b = await _create_event(client, "Firmenfeier", event_date="2025-09-10")
        assert (await _book(client, event_a, item_id, 4)).status_code == 201
        assert (await _book(client, event_b, item_id, 1)).status_code == 409

        response = await client.patch(f"/api/events/{event_a}", json={"status": "abgeschlossen"})
        assert response.status_code == 200

        assert (await _book(client, event_b, item_id, 1)).status_code == 201
        history = (await client.get(f"/api/events/{event_a}/history")).json()
        assert any(h["action"] == "status_changed" for h in history)

    async def test_concurrent_requests_for_last_units(self, client: AsyncClient):
        """Only one of two racing bookings for the same units is written."""
        item_id = await _create_item(client, "CDJ-3000", 4)
        event_a = await _create_event(client, "A", event_date="2025-09-10")
        event_b = await _create_event(client, "B", event_date="2025-09-10")

        use_case = BookEquipmentUseCase()
        results = await asyncio.gather(
            use_case.execute(event_a, BookEquipmentRequest(inventory_item_id=item_id, quantity=3)),
            use_case.execute(event_b, BookEquipmentRequest(inventory_item_id=item_id, quantity=3)),
            return_exceptions=True,
        )

        assert sum(isinstance(r, OverbookingConflictError) for r in results) == 1
        availability = await _available(client, item_id, "2025-09-10", "2025-09-10")
        assert availability["booked"] == 3


class TestSetFlow:
    async def test_partial_success(self, client: AsyncClient):
        cdj = await _create_item(client, "CDJ-3000", 4)
        mixer = await _create_item(client, "DJM-900", 1, rate=80.0)
        event_id = await _create_event(client, "Sommerfest", event_date="2025-09-10")

        response = await client.post(
            "/api/sets",
            json={
                "name": "DJ Standard Set",
                "items": [
                    {"inventory_item_id": cdj, "quantity": 2},
                    {"inventory_item_id": mixer, "quantity": 2},
                ],
            },
        )
        assert response.status_code == 201
        set_id = response.json()["id"]

        response = await client.post(f"/api/sets/{set_id}/apply/{event_id}", json={"rental_days": 2})

        assert response.status_code == 201
        body = response.json()
        assert body["inserted_count"] == 1
        assert body["message"] == "1 Artikel hinzugefügt, 1 Konflikte"
        assert body["conflicts"] == [
            {"inventory_item_id": mixer, "item_name": "DJM-900", "needed": 2, "available": 1}
        ]

        lines = (await client.get(f"/api/events/{event_id}/inventory-items")).json()
        assert [(line["item_name"], line["quantity"], line["rental_days"]) for line in lines] == [
            ("CDJ-3000", 2, 2)
        ]

        history = (await client.get(f"/api/events/{event_id}/history")).json()
        assert history[0]["detail"] == 'Set "DJ Standard Set" hinzugefügt (1 Artikel)'

    async def test_unknown_item_leaves_no_set_behind(self, client: AsyncClient):
        cdj = await _create_item(client, "CDJ-3000", 4)

        response = await client.post(
            "/api/sets",
            json={
                "name": "Broken",
                "items": [
                    {"inventory_item_id": cdj, "quantity": 2},
                    {"inventory_item_id": 9999, "quantity": 1},
                ],
            },
        )

        assert response.status_code == 404
        assert (await client.get("/api/sets")).json() == []

    async def test_reapplying_sums_quantities(self, client: AsyncClient):
        cdj = await _create_item(client, "CDJ-3000", 4)
        event_id = await _create_event(client, "Sommerfest", event_date="2025-09-10")
        set_id = (
            await client.post(
                "/api/sets", json={"name": "DJ", "items": [{"inventory_item_id": cdj, "quantity": 2}]}
            )
        ).json()["id"]

        for _ in range(2):
            response = await client.post(f"/api/sets/{set_id}/apply/{event_id}")
            assert response.json()["message"] == "Alle 1 Artikel hinzugefügt"

        lines = (await client.get(f"/api/events/{event_id}/inventory-items")).json()
        assert len(lines) == 1
        assert lines[0]["quantity"] == 4


class TestQuoteFlow:
    async def test_generate_from_event_and_number_sequentially(self, client: AsyncClient):
        item_id = await _create_item(client, "CDJ-3000", 4)
        event_id = await _create_event(client, "Sommerfest", event_date="2025-09-10")
        assert (await _book(client, event_id, item_id, 2, days=2)).status_code == 201
        await client.post(f"/api/events/{event_id}/crew", json={"name": "Anna", "role": "DJ"})

        first = (await client.post(f"/api/quotes/from-event/{event_id}")).json()
        second = (await client.post(f"/api/quotes/from-event/{event_id}")).json()

        year = date.today().year
        assert first["quote_number"] == f"AN-{year}-0001"
        assert second["quote_number"] == f"AN-{year}-0002"
        assert [i["description"] for i in first["items"]] == [
            "CDJ-3000 (2 Tage)",
            "Personal: Anna (DJ)",
        ]
        assert first["subtotal"] == 200.0
        assert first["tax_amount"] == 38.0
        assert first["total"] == 238.0
        assert first["client_name"] == "Stadtwerke"

    async def test_manual_quote_totals(self, client: AsyncClient):
        response = await client.post(
            "/api/quotes",
            json={
                "quote_type": "Rechnung",
                "issue_date": "2025-05-01",
                "items": [
                    {"description": "Lautsprecher", "quantity": 2, "unit_price": 100},
                    {"description": "Aufbau", "unit": "Pauschale", "unit_price": 80},
                ],
            },
        )
        assert response.status_code == 201
        quote = response.json()
        assert quote["quote_number"] == "RE-2025-0001"
        assert (quote["subtotal"], quote["tax_amount"], quote["total"]) == (280.0, 53.2, 333.2)

        item_id = quote["items"][1]["id"]
        response = await client.delete(f"/api/quotes/{quote['id']}/items/{item_id}")
        assert response.status_code == 204

        reloaded = (await client.get(f"/api/quotes/{quote['id']}")).json()
        assert (reloaded["subtotal"], reloaded["total"]) == (200.0, 238.0)
