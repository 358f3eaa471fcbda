"""Tests for the manual quote use cases."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from gearbook.application.dto.requests import (
    CreateQuoteRequest,
    QuoteItemRequest,
    UpdateQuoteItemRequest,
    UpdateQuoteRequest,
)
from gearbook.application.use_cases.manage_quotes import (
    AddQuoteItemUseCase,
    CreateQuoteUseCase,
    DeleteQuoteItemUseCase,
    UpdateQuoteItemUseCase,
    UpdateQuoteUseCase,
)
from gearbook.core.entities.quote import Quote, QuoteItem, QuoteStatus, QuoteType
from gearbook.core.exceptions import (
    EventNotFoundError,
    InvalidEnumError,
    InvalidStatusError,
    QuoteItemNotFoundError,
    QuoteNotFoundError,
    ValidationError,
)


@pytest.fixture
def quote():
    return Quote(id=1, quote_number="AN-2025-0001", tax_rate=19.0, issue_date=date(2025, 1, 5))


@pytest.fixture
def quote_store(quote):
    store = AsyncMock()
    store.get_quote.return_value = quote
    store.create_quote.side_effect = lambda q: q.model_copy(update={"id": 2})
    store.update_quote.side_effect = lambda q, recalculate=False: q
    store.add_item.side_effect = lambda item: item.model_copy(update={"id": 9})
    store.update_item.side_effect = lambda item: item
    return store


@pytest.fixture
def event_store(sample_event):
    store = AsyncMock()
    store.get_event.return_value = sample_event
    return store


class TestCreateQuoteUseCase:
    async def test_create_with_items(self, quote_store, event_store):
        use_case = CreateQuoteUseCase(quote_store=quote_store, event_store=event_store)

        await use_case.execute(
            CreateQuoteRequest(
                event_id=10,
                client_name="Stadtwerke",
                items=[
                    QuoteItemRequest(description="Lautsprecher", quantity=2, unit_price=100),
                    QuoteItemRequest(description="Aufbau", unit="Pauschale", unit_price=80),
                ],
            )
        )

        created = quote_store.create_quote.call_args.args[0]
        assert [i.total for i in created.items] == [200.0, 80.0]
        assert created.tax_rate == 19.0
        assert created.issue_date == date.today()

    async def test_unknown_event(self, quote_store, event_store):
        event_store.get_event.return_value = None
        use_case = CreateQuoteUseCase(quote_store=quote_store, event_store=event_store)
        with pytest.raises(EventNotFoundError):
            await use_case.execute(CreateQuoteRequest(event_id=99))

    async def test_invalid_type_and_status(self, quote_store, event_store):
        use_case = CreateQuoteUseCase(quote_store=quote_store, event_store=event_store)
        with pytest.raises(InvalidEnumError):
            await use_case.execute(CreateQuoteRequest(quote_type="Mahnung"))
        with pytest.raises(InvalidStatusError):
            await use_case.execute(CreateQuoteRequest(status="Offen"))

    async def test_blank_item_description(self, quote_store, event_store):
        use_case = CreateQuoteUseCase(quote_store=quote_store, event_store=event_store)
        with pytest.raises(ValidationError):
            await use_case.execute(CreateQuoteRequest(items=[QuoteItemRequest(description=" ")]))
        quote_store.create_quote.assert_not_awaited()


class TestUpdateQuoteUseCase:
    async def test_tax_rate_change_recalculates(self, quote_store, event_store):
        use_case = UpdateQuoteUseCase(quote_store=quote_store, event_store=event_store)

        updated = await use_case.execute(1, UpdateQuoteRequest(tax_rate=7))

        assert updated.tax_rate == 7
        assert quote_store.update_quote.call_args.kwargs["recalculate"] is True

    async def test_status_change_keeps_totals(self, quote_store, event_store):
        use_case = UpdateQuoteUseCase(quote_store=quote_store, event_store=event_store)

        updated = await use_case.execute(1, UpdateQuoteRequest(status="Gesendet", quote_type="Rechnung"))

        assert updated.status == QuoteStatus.SENT
        assert updated.quote_type == QuoteType.INVOICE
        assert updated.quote_number == "AN-2025-0001"
        assert quote_store.update_quote.call_args.kwargs["recalculate"] is False

    async def test_unknown_quote(self, quote_store, event_store):
        quote_store.get_quote.return_value = None
        use_case = UpdateQuoteUseCase(quote_store=quote_store, event_store=event_store)
        with pytest.raises(QuoteNotFoundError):
            await use_case.execute(1, UpdateQuoteRequest(notes="x"))


class TestQuoteItemUseCases:
    async def test_add_item(self, quote_store):
        use_case = AddQuoteItemUseCase(quote_store=quote_store)

        item = await use_case.execute(1, QuoteItemRequest(description="Licht", quantity=3, unit_price=20))

        assert item.id == 9
        assert item.quote_id == 1
        assert item.total == pytest.approx(60.0)

    async def test_add_item_to_missing_quote(self, quote_store):
        quote_store.get_quote.return_value = None
        use_case = AddQuoteItemUseCase(quote_store=quote_store)
        with pytest.raises(QuoteNotFoundError):
            await use_case.execute(1, QuoteItemRequest(description="Licht"))

    async def test_update_item_recomputes_total(self, quote_store):
        quote_store.get_item.return_value = QuoteItem(
            id=4, quote_id=1, position=1, description="Licht", quantity=1, unit_price=20
        )
        use_case = UpdateQuoteItemUseCase(quote_store=quote_store)

        item = await use_case.execute(1, 4, UpdateQuoteItemRequest(quantity=5))

        assert item.quantity == 5
        assert item.total == pytest.approx(100.0)
        assert item.description == "Licht"

    async def test_update_missing_item(self, quote_store):
        quote_store.get_item.return_value = None
        use_case = UpdateQuoteItemUseCase(quote_store=quote_store)
        with pytest.raises(QuoteItemNotFoundError):
            await use_case.execute(1, 4, UpdateQuoteItemRequest(quantity=5))

    async def test_delete_missing_item(self, quote_store):
        quote_store.delete_item.return_value = False
        use_case = DeleteQuoteItemUseCase(quote_store=quote_store)
        with pytest.raises(QuoteItemNotFoundError):
            await use_case.execute(1, 4)
