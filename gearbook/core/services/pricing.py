"""Quote pricing rules: booking lines to quote items, totals and numbering."""

from collections.abc import Iterable
from dataclasses import dataclass

from gearbook.core.entities.booking import EventInventoryLine
from gearbook.core.entities.event import CrewMember, EquipmentEntry
from gearbook.core.entities.quote import QuoteItem, QuoteType


@dataclass(frozen=True)
class QuoteTotals:
    subtotal: float
    tax_amount: float
    total: float


def compute_totals(line_totals: Iterable[float], tax_rate: float) -> QuoteTotals:
    """Subtotal from stored line totals, tax as a percentage of it."""
    subtotal = float(sum(line_totals))
    tax_amount = subtotal * (tax_rate / 100)
    return QuoteTotals(subtotal=subtotal, tax_amount=tax_amount, total=subtotal + tax_amount)


def effective_day_rate(line: EventInventoryLine) -> float:
    """Booking override price if set, else the catalog rate."""
    if line.unit_price > 0:
        return line.unit_price
    return line.rental_rate or 0.0


def format_quote_number(quote_type: QuoteType, year: int, sequence: int) -> str:
    """PREFIX-YEAR-NNNN, e.g. AN-2025-0001."""
    return f"{quote_type.number_prefix}-{year}-{sequence:04d}"


def booking_quote_item(line: EventInventoryLine, position: int) -> QuoteItem:
    """One quote item per booking line, priced quantity * days * rate."""
    days = line.rental_days
    day_label = "Tag" if days == 1 else "Tage"
    return QuoteItem(
        position=position,
        description=f"{line.item_name} ({days} {day_label})",
        quantity=line.quantity,
        unit="Stk",
        unit_price=effective_day_rate(line) * days,
    )


def crew_quote_item(member: CrewMember, position: int) -> QuoteItem:
    """Zero-cost placeholder for an assigned crew member."""
    role = f" ({member.role})" if member.role else ""
    return QuoteItem(
        position=position,
        description=f"Personal: {member.name}{role}",
        quantity=1,
        unit="Pauschale",
        unit_price=0.0,
    )


def equipment_quote_item(entry: EquipmentEntry, position: int) -> QuoteItem:
    """Zero-cost line for legacy free-text equipment."""
    return QuoteItem(
        position=position,
        description=entry.asset_name,
        quantity=1,
        unit="Stk",
        unit_price=0.0,
    )


def build_event_quote_items(
    lines: list[EventInventoryLine],
    crew: list[CrewMember],
    equipment: list[EquipmentEntry],
) -> list[QuoteItem]:
    """
    Quote items for an event: bookings, then crew, then legacy equipment.

    Legacy entries linked to one of the event's booking lines are already
    represented by that line and are skipped.
    """
    booked_line_ids = {line.id for line in lines}
    items: list[QuoteItem] = []
    position = 1

    for line in lines:
        items.append(booking_quote_item(line, position))
        position += 1

    for member in crew:
        items.append(crew_quote_item(member, position))
        position += 1

    for entry in equipment:
        if entry.booking_line_id is not None and entry.booking_line_id in booked_line_ids:
            continue
        items.append(equipment_quote_item(entry, position))
        position += 1

    return items
