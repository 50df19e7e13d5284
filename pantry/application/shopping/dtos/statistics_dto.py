"""Shopping statistics DTOs."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class TopCheckedIngredientDTO:
    ingredient_id: str
    ingredient_name: str
    check_count: int
    check_rate_percentage: int
    """round(check_count / total_sessions * 100); 0 коли sessions немає."""


@dataclass
class MonthlyCountDTO:
    year_month: str
    """``YYYY-MM``."""

    count: int


@dataclass
class ShoppingStatisticsDTO:
    """Aggregated statistics за period."""

    period_days: int
    total_sessions: int
    total_checked_ingredients: int
    average_session_duration_minutes: float
    top_checked_ingredients: list[TopCheckedIngredientDTO] = field(default_factory=list)
    monthly_session_counts: list[MonthlyCountDTO] = field(default_factory=list)


@dataclass
class QuickAccessIngredientDTO:
    """Часто перевірюваний ingredient з поточною класифікацією."""

    ingredient_id: str
    ingredient_name: str
    check_count: int
    last_checked_at: datetime
    current_stock_status: str
    current_expiry_status: str


@dataclass
class StockStatusBreakdownDTO:
    in_stock_checks: int = 0
    low_stock_checks: int = 0
    out_of_stock_checks: int = 0


@dataclass
class IngredientCheckStatisticsDTO:
    """Check history одного ingredient."""

    ingredient_id: str
    ingredient_name: str
    total_check_count: int
    first_checked_at: datetime
    last_checked_at: datetime
    monthly_check_counts: list[MonthlyCountDTO] = field(default_factory=list)
    stock_status_breakdown: StockStatusBreakdownDTO = field(default_factory=StockStatusBreakdownDTO)
