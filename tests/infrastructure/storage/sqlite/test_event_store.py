"""Tests for SQLiteEventStore."""

from datetime import date

from gearbook.core.entities import CrewMember, EquipmentEntry, Event, EventStatus


class TestEventStore:
    async def test_create_writes_history(self, event_store, stored_event):
        fetched = await event_store.get_event(stored_event.id)
        assert fetched.status == EventStatus.CONFIRMED
        assert fetched.setup_date == date(2025, 9, 10)
        assert fetched.occupancy_window.end == date(2025, 9, 11)

        history = await event_store.list_history(stored_event.id)
        assert [h.action for h in history] == ["created"]
        assert history[0].detail == 'Event "Sommerfest" erstellt'

    async def test_undated_event(self, event_store):
        event = await event_store.create_event(Event(title="Anfrage"))
        fetched = await event_store.get_event(event.id)
        assert fetched.occupancy_window is None

    async def test_status_change_is_recorded(self, event_store, stored_event):
        stored_event.status = EventStatus.CLOSED
        await event_store.update_event(stored_event)

        history = await event_store.list_history(stored_event.id)
        assert history[0].action == "status_changed"
        assert history[0].detail == "Status: bestätigt → abgeschlossen"

    async def test_unchanged_status_records_nothing(self, event_store, stored_event):
        stored_event.title = "Sommerfest 2025"
        await event_store.update_event(stored_event)

        history = await event_store.list_history(stored_event.id)
        assert [h.action for h in history] == ["created"]
        assert (await event_store.get_event(stored_event.id)).title == "Sommerfest 2025"

    async def test_add_history(self, event_store, stored_event):
        entry = await event_store.add_history(stored_event.id, "note", "Kunde angerufen")
        assert entry.id is not None
        assert len(await event_store.list_history(stored_event.id)) == 2

    async def test_crew_and_equipment(self, event_store, stored_event):
        await event_store.add_crew_member(CrewMember(event_id=stored_event.id, name="Anna", role="DJ"))
        await event_store.add_equipment_entry(
            EquipmentEntry(event_id=stored_event.id, asset_name="Nebelmaschine")
        )

        crew = await event_store.list_crew(stored_event.id)
        equipment = await event_store.list_equipment_entries(stored_event.id)
        assert [(c.name, c.role) for c in crew] == [("Anna", "DJ")]
        assert [e.asset_name for e in equipment] == ["Nebelmaschine"]
        assert equipment[0].booking_line_id is None
