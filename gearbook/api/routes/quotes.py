"""Quote endpoints: estimates, invoices and credit notes."""

from fastapi import APIRouter, Depends, Query, Response, status

from gearbook.api.dependencies import (
    get_add_quote_item_use_case,
    get_create_quote_use_case,
    get_delete_quote_item_use_case,
    get_generate_quote_use_case,
    get_qt_store,
    get_update_quote_item_use_case,
    get_update_quote_use_case,
)
from gearbook.application.dto.converters import quote_response
from gearbook.application.dto.requests import (
    CreateQuoteRequest,
    GenerateQuoteRequest,
    QuoteItemRequest,
    UpdateQuoteItemRequest,
    UpdateQuoteRequest,
)
from gearbook.application.dto.responses import (
    ErrorResponse,
    QuoteItemResponse,
    QuoteResponse,
)
from gearbook.application.use_cases import (
    AddQuoteItemUseCase,
    CreateQuoteUseCase,
    DeleteQuoteItemUseCase,
    GenerateQuoteUseCase,
    UpdateQuoteItemUseCase,
    UpdateQuoteUseCase,
)
from gearbook.core.exceptions import QuoteNotFoundError
from gearbook.infrastructure.storage.sqlite import SQLiteQuoteStore

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


@router.get("", response_model=list[QuoteResponse])
async def list_quotes(
    event_id: int | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    quote_type: str | None = None,
    store: SQLiteQuoteStore = Depends(get_qt_store),
) -> list[QuoteResponse]:
    """List quote headers newest first. Items are only returned by GET /{id}."""
    quotes = await store.list_quotes(
        event_id=event_id,
        status=status_filter,
        quote_type=quote_type,
    )
    return [quote_response(q) for q in quotes]


@router.post(
    "",
    response_model=QuoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def create_quote(
    request: CreateQuoteRequest,
    use_case: CreateQuoteUseCase = Depends(get_create_quote_use_case),
) -> QuoteResponse:
    """Create a manual quote."""
    quote = await use_case.execute(request)
    return use_case.to_response(quote)


@router.post(
    "/from-event/{event_id}",
    response_model=QuoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def generate_quote(
    event_id: int,
    request: GenerateQuoteRequest | None = None,
    use_case: GenerateQuoteUseCase = Depends(get_generate_quote_use_case),
) -> QuoteResponse:
    """Price the event's bookings, crew and legacy equipment into a new quote."""
    quote = await use_case.execute(event_id, request or GenerateQuoteRequest())
    return use_case.to_response(quote)


@router.get(
    "/{quote_id}",
    response_model=QuoteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_quote(
    quote_id: int,
    store: SQLiteQuoteStore = Depends(get_qt_store),
) -> QuoteResponse:
    """Get a quote with its items."""
    quote = await store.get_quote(quote_id)
    if quote is None:
        raise QuoteNotFoundError(quote_id)
    return quote_response(quote)


@router.put(
    "/{quote_id}",
    response_model=QuoteResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_quote(
    quote_id: int,
    request: UpdateQuoteRequest,
    use_case: UpdateQuoteUseCase = Depends(get_update_quote_use_case),
) -> QuoteResponse:
    """Update the quote header."""
    quote = await use_case.execute(quote_id, request)
    return use_case.to_response(quote)


@router.delete(
    "/{quote_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_quote(
    quote_id: int,
    store: SQLiteQuoteStore = Depends(get_qt_store),
) -> Response:
    """Delete a quote and its items."""
    if not await store.delete_quote(quote_id):
        raise QuoteNotFoundError(quote_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{quote_id}/items",
    response_model=QuoteItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_quote_item(
    quote_id: int,
    request: QuoteItemRequest,
    use_case: AddQuoteItemUseCase = Depends(get_add_quote_item_use_case),
) -> QuoteItemResponse:
    """Append a line item; totals are recomputed."""
    item = await use_case.execute(quote_id, request)
    return use_case.to_response(item)


@router.put(
    "/{quote_id}/items/{item_id}",
    response_model=QuoteItemResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_quote_item(
    quote_id: int,
    item_id: int,
    request: UpdateQuoteItemRequest,
    use_case: UpdateQuoteItemUseCase = Depends(get_update_quote_item_use_case),
) -> QuoteItemResponse:
    """Update a line item; totals are recomputed."""
    item = await use_case.execute(quote_id, item_id, request)
    return use_case.to_response(item)


@router.delete(
    "/{quote_id}/items/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_quote_item(
    quote_id: int,
    item_id: int,
    use_case: DeleteQuoteItemUseCase = Depends(get_delete_quote_item_use_case),
) -> Response:
    """Delete a line item; totals are recomputed."""
    await use_case.execute(quote_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
