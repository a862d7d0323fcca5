"""FastAPI endpoints for the Menu domain."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from menu.api.schemas import (
    CategoryIdResponse,
    CategoryListResponse,
    CategoryResponse,
    ChangePriceRequest,
    CoffeeItemIdResponse,
    CoffeeItemListResponse,
    CoffeeItemResponse,
    CreateCategoryRequest,
    CreateCoffeeItemRequest,
    PriceHistoryEntryResponse,
    PriceHistoryResponse,
    SetAvailabilityRequest,
    StatusResponse,
    UpdateCategoryRequest,
    UpdateCoffeeItemDetailsRequest,
)
from menu.category.category import Category
from menu.category.management import CreateCategory, UpdateCategory
from menu.coffee_item.availability import SetCoffeeItemAvailability
from menu.coffee_item.creation import CreateCoffeeItem
from menu.coffee_item.details import ChangeCoffeeItemPrice, UpdateCoffeeItemDetails
from menu.projections.menu_board import CoffeeItemCard
from menu.projections.price_history import PriceHistory

coffee_item_router = APIRouter(prefix="/coffee-items", tags=["coffee-items"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


def _card_response(card):
    return CoffeeItemResponse(
        coffee_item_id=str(card.coffee_item_id),
        name=card.name,
        description=card.description,
        price=card.price,
        is_available=card.is_available,
        category_id=str(card.category_id),
        category_name=card.category_name,
        image_url=card.image_url,
    )


# --- Coffee item endpoints ---


@coffee_item_router.post("", status_code=201, response_model=CoffeeItemIdResponse)
async def create_coffee_item(body: CreateCoffeeItemRequest) -> CoffeeItemIdResponse:
    command = CreateCoffeeItem(
        name=body.name,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
        image_url=body.image_url,
    )
    result = current_domain.process(command, asynchronous=False)
    return CoffeeItemIdResponse(coffee_item_id=result)


@coffee_item_router.get("", response_model=CoffeeItemListResponse)
async def list_coffee_items(
    include_unavailable: bool = False,
    category_id: str | None = None,
) -> CoffeeItemListResponse:
    """List the menu board. Items taken off sale are hidden unless asked for."""
    query = current_domain.repository_for(CoffeeItemCard)._dao.query
    if not include_unavailable:
        query = query.filter(is_available=True)
    if category_id:
        query = query.filter(category_id=category_id)

    cards = query.order_by("name").limit(None).all().items
    return CoffeeItemListResponse(coffee_items=[_card_response(card) for card in cards])


@coffee_item_router.get("/{coffee_item_id}", response_model=CoffeeItemResponse)
async def get_coffee_item(coffee_item_id: str) -> CoffeeItemResponse:
    card = current_domain.repository_for(CoffeeItemCard).get(coffee_item_id)
    return _card_response(card)


@coffee_item_router.put("/{coffee_item_id}", response_model=StatusResponse)
async def update_coffee_item_details(coffee_item_id: str, body: UpdateCoffeeItemDetailsRequest) -> StatusResponse:
    command = UpdateCoffeeItemDetails(
        coffee_item_id=coffee_item_id,
        name=body.name,
        description=body.description,
        price=body.price,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@coffee_item_router.put("/{coffee_item_id}/price", response_model=StatusResponse)
async def change_coffee_item_price(coffee_item_id: str, body: ChangePriceRequest) -> StatusResponse:
    command = ChangeCoffeeItemPrice(coffee_item_id=coffee_item_id, price=body.price)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@coffee_item_router.put("/{coffee_item_id}/availability", response_model=StatusResponse)
async def set_coffee_item_availability(coffee_item_id: str, body: SetAvailabilityRequest) -> StatusResponse:
    command = SetCoffeeItemAvailability(
        coffee_item_id=coffee_item_id,
        is_available=body.is_available,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@coffee_item_router.get("/{coffee_item_id}/price-history", response_model=PriceHistoryResponse)
async def get_price_history(coffee_item_id: str) -> PriceHistoryResponse:
    """Price changes for a coffee item, oldest first."""
    # 404 for unknown items rather than an empty history
    current_domain.repository_for(CoffeeItemCard).get(coffee_item_id)

    entries = (
        current_domain.repository_for(PriceHistory)
        ._dao.query.filter(coffee_item_id=coffee_item_id)
        .order_by("changed_at")
        .limit(None)
        .all()
        .items
    )
    return PriceHistoryResponse(
        coffee_item_id=coffee_item_id,
        entries=[
            PriceHistoryEntryResponse(
                previous_price=entry.previous_price,
                new_price=entry.new_price,
                changed_at=entry.changed_at,
            )
            for entry in entries
        ],
    )


# --- Category endpoints ---


@category_router.post("", status_code=201, response_model=CategoryIdResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(
        name=body.name,
        description=body.description,
    )
    result = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=result)


@category_router.put("/{category_id}", response_model=StatusResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> StatusResponse:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        description=body.description,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@category_router.get("", response_model=CategoryListResponse)
async def list_categories() -> CategoryListResponse:
    categories = current_domain.repository_for(Category)._dao.query.order_by("name").limit(None).all().items
    return CategoryListResponse(
        categories=[
            CategoryResponse(
                category_id=str(category.id),
                name=category.name,
                description=category.description,
            )
            for category in categories
        ]
    )
