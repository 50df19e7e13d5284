"""Ingredient DTOs - data transfer objects for the presentation layer."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pantry.application.shared import PaginationDTO
from pantry.domain.ingredients.entities import Category, Ingredient, Unit


@dataclass
class CategoryDTO:
    """Category data transfer object."""

    id: str
    name: str
    display_order: int

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDTO":
        return cls(id=str(category.id), name=category.name, display_order=category.display_order)


@dataclass
class UnitDTO:
    """Unit data transfer object."""

    id: str
    name: str
    symbol: str
    type: str
    display_order: int

    @classmethod
    def from_entity(cls, unit: Unit) -> "UnitDTO":
        return cls(
            id=str(unit.id),
            name=unit.name,
            symbol=unit.symbol,
            type=unit.type.value,
            display_order=unit.display_order,
        )


@dataclass
class IngredientDTO:
    """Ingredient data transfer object (with derived classification)."""

    id: str
    user_id: str
    name: str
    category_id: str
    category_name: Optional[str]
    memo: Optional[str]
    price: Optional[Decimal]
    purchase_date: date
    best_before_date: Optional[date]
    use_by_date: Optional[date]
    quantity: Decimal
    unit_id: str
    unit_symbol: Optional[str]
    storage_type: str
    storage_detail: Optional[str]
    threshold: Optional[Decimal]
    stock_status: str
    expiry_status: str
    days_until_expiry: Optional[int]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls,
        ingredient: Ingredient,
        today: date,
        category: Optional[Category] = None,
        unit: Optional[Unit] = None,
    ) -> "IngredientDTO":
        stock = ingredient.stock
        expiry = ingredient.expiry_info
        return cls(
            id=str(ingredient.id),
            user_id=ingredient.user_id,
            name=ingredient.name.value,
            category_id=str(ingredient.category_id),
            category_name=category.name if category else None,
            memo=ingredient.memo.value if ingredient.memo else None,
            price=ingredient.price.amount if ingredient.price else None,
            purchase_date=ingredient.purchase_date,
            best_before_date=expiry.best_before_date if expiry else None,
            use_by_date=expiry.use_by_date if expiry else None,
            quantity=stock.quantity,
            unit_id=str(stock.unit_id),
            unit_symbol=unit.symbol if unit else None,
            storage_type=stock.storage_location.type.value,
            storage_detail=stock.storage_location.detail,
            threshold=stock.threshold,
            stock_status=ingredient.stock_status.value,
            expiry_status=ingredient.get_expiry_status(today).value,
            days_until_expiry=ingredient.days_until_expiry(today),
            created_at=ingredient.created_at,
            updated_at=ingredient.updated_at,
        )


@dataclass
class IngredientListDTO:
    """Paged ingredient listing."""

    items: list[IngredientDTO]
    pagination: PaginationDTO


@dataclass
class CategorySummaryDTO:
    """Counts shown above a category's ingredient list."""

    total_items: int = 0
    out_of_stock_count: int = 0
    low_stock_count: int = 0
    expiring_soon_count: int = 0


@dataclass
class IngredientsByCategoryDTO:
    """Ingredients of one category (shopping view)."""

    category: CategoryDTO
    ingredients: list[IngredientDTO] = field(default_factory=list)
    summary: CategorySummaryDTO = field(default_factory=CategorySummaryDTO)
