"""Entity to response DTO conversions shared by use cases and routes."""

from datetime import date

from gearbook.application.dto.responses import (
    AvailabilityResponse,
    BookingLineResponse,
    CrewMemberResponse,
    EquipmentEntryResponse,
    EquipmentSetResponse,
    EventHistoryResponse,
    EventResponse,
    InventoryItemResponse,
    PackingListResponse,
    PackingSummaryResponse,
    QuoteItemResponse,
    QuoteResponse,
    RepairLogResponse,
    SetItemResponse,
)
from gearbook.core.entities import (
    Availability,
    CrewMember,
    EquipmentEntry,
    EquipmentSet,
    EquipmentSetItem,
    Event,
    EventHistoryEntry,
    EventInventoryLine,
    InventoryItem,
    PackingList,
    Quote,
    QuoteItem,
    RepairLog,
)


def inventory_item_response(item: InventoryItem) -> InventoryItemResponse:
    return InventoryItemResponse(
        id=item.id,  # type: ignore[arg-type]
        name=item.name,
        category=item.category,
        description=item.description,
        quantity=item.quantity,
        rental_rate=item.rental_rate,
        purchase_price=item.purchase_price,
        barcode=item.barcode,
        notes=item.notes,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


def repair_response(repair: RepairLog) -> RepairLogResponse:
    return RepairLogResponse(
        id=repair.id,  # type: ignore[arg-type]
        inventory_item_id=repair.inventory_item_id,
        quantity_affected=repair.quantity_affected,
        issue_description=repair.issue_description,
        status=repair.status.value,
        repair_cost=repair.repair_cost,
        notes=repair.notes,
        reported_at=repair.reported_at,
        resolved_at=repair.resolved_at,
    )


def availability_response(
    availability: Availability,
    date_from: date | None = None,
    date_to: date | None = None,
) -> AvailabilityResponse:
    return AvailabilityResponse(
        **availability.model_dump(),
        date_from=date_from,
        date_to=date_to,
    )


def event_response(event: Event) -> EventResponse:
    window = event.occupancy_window
    return EventResponse(
        id=event.id,  # type: ignore[arg-type]
        title=event.title,
        status=event.status.value,
        client_name=event.client_name,
        event_date=event.event_date,
        setup_date=event.setup_date,
        teardown_date=event.teardown_date,
        window_start=window.start if window else None,
        window_end=window.end if window else None,
        created_at=event.created_at,
        updated_at=event.updated_at,
    )


def history_response(entry: EventHistoryEntry) -> EventHistoryResponse:
    return EventHistoryResponse(
        id=entry.id,  # type: ignore[arg-type]
        event_id=entry.event_id,
        action=entry.action,
        detail=entry.detail,
        changed_at=entry.changed_at,
    )


def crew_response(member: CrewMember) -> CrewMemberResponse:
    return CrewMemberResponse(
        id=member.id,  # type: ignore[arg-type]
        event_id=member.event_id,
        name=member.name,
        role=member.role,
    )


def equipment_entry_response(entry: EquipmentEntry) -> EquipmentEntryResponse:
    return EquipmentEntryResponse(
        id=entry.id,  # type: ignore[arg-type]
        event_id=entry.event_id,
        asset_name=entry.asset_name,
        booking_line_id=entry.booking_line_id,
    )


def booking_line_response(line: EventInventoryLine) -> BookingLineResponse:
    return BookingLineResponse(
        id=line.id,  # type: ignore[arg-type]
        event_id=line.event_id,
        inventory_item_id=line.inventory_item_id,
        item_name=line.item_name,
        category=line.category,
        quantity=line.quantity,
        rental_days=line.rental_days,
        unit_price=line.unit_price,
        notes=line.notes,
        packed=line.packed,
    )


def packing_list_response(packing_list: PackingList) -> PackingListResponse:
    return PackingListResponse(
        event_id=packing_list.event_id,
        items=[booking_line_response(line) for line in packing_list.items],
        summary=PackingSummaryResponse(
            total=packing_list.total,
            packed=packing_list.packed,
            unpacked=packing_list.unpacked,
        ),
    )


def set_item_response(set_item: EquipmentSetItem) -> SetItemResponse:
    return SetItemResponse(
        id=set_item.id,  # type: ignore[arg-type]
        set_id=set_item.set_id,  # type: ignore[arg-type]
        inventory_item_id=set_item.inventory_item_id,
        quantity=set_item.quantity,
        item_name=set_item.item_name,
        category=set_item.category,
        rental_rate=set_item.rental_rate,
        stock_quantity=set_item.stock_quantity,
    )


def equipment_set_response(equipment_set: EquipmentSet) -> EquipmentSetResponse:
    return EquipmentSetResponse(
        id=equipment_set.id,  # type: ignore[arg-type]
        name=equipment_set.name,
        description=equipment_set.description,
        notes=equipment_set.notes,
        item_count=(
            equipment_set.item_count
            if equipment_set.item_count is not None
            else len(equipment_set.items)
        ),
        items=[set_item_response(i) for i in equipment_set.items],
        created_at=equipment_set.created_at,
        updated_at=equipment_set.updated_at,
    )


def quote_item_response(item: QuoteItem) -> QuoteItemResponse:
    return QuoteItemResponse(
        id=item.id,  # type: ignore[arg-type]
        quote_id=item.quote_id,  # type: ignore[arg-type]
        position=item.position or 0,
        description=item.description,
        quantity=item.quantity,
        unit=item.unit,
        unit_price=item.unit_price,
        total=item.total,
    )


def quote_response(quote: Quote) -> QuoteResponse:
    return QuoteResponse(
        id=quote.id,  # type: ignore[arg-type]
        event_id=quote.event_id,
        quote_number=quote.quote_number,
        quote_type=quote.quote_type.value,
        status=quote.status.value,
        client_name=quote.client_name,
        client_address=quote.client_address,
        issue_date=quote.issue_date,
        valid_until=quote.valid_until,
        tax_rate=quote.tax_rate,
        subtotal=quote.subtotal,
        tax_amount=quote.tax_amount,
        total=quote.total,
        notes=quote.notes,
        item_count=quote.item_count,
        items=[quote_item_response(i) for i in quote.items],
        created_at=quote.created_at,
        updated_at=quote.updated_at,
    )
