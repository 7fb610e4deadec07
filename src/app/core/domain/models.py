"""Domain models used in business logic."""
import re
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Largest value a SQLite INTEGER (and so LIMIT/OFFSET) can hold
MAX_SQL_INTEGER = 2**63 - 1


def parse_date(value: Any) -> date | None:
    """
    Parse a calendar date string (YYYY-MM-DD) into a date.

    Only the exact calendar form is accepted, so the stored date reads back
    as the same string.

    Returns:
        The calendar date, or None if the value does not parse
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


class ClientValidation(BaseModel):
    """Outcome of checking a client's invariants."""
    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class SaleProjection(BaseModel):
    """The part of a sale shown in a client listing."""
    sale_date: str
    value: float


class SaleStatistic(BaseModel):
    date: str
    amount: float


class ClientDetails(BaseModel):
    email: str
    birth_date: str


class ClientInfo(BaseModel):
    full_name: str
    details: ClientDetails


class ClientDuplicate(BaseModel):
    full_name: str


class ClientStatistics(BaseModel):
    sales: list[SaleStatistic] = Field(default_factory=list)


class FormattedClient(BaseModel):
    """
    Nested client shape used by list responses.

    `duplicate` repeats the full name on purpose: consumers of the list
    endpoint read it from there.
    """
    info: ClientInfo
    duplicate: ClientDuplicate
    statistics: ClientStatistics


class Client(BaseModel):
    """Domain model for Client used in business logic.

    Field content is not constrained at construction time; call
    validate_fields() before persisting.
    """
    id: int | None = Field(default=None, description="Database-assigned ID")
    name: str = ""
    email: str = ""
    birth_date: str = Field(default="", description="ISO calendar date")
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}

    @field_validator("name", "email", "birth_date", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def validate_fields(self) -> ClientValidation:
        """
        Check the client's invariants without raising.

        Messages come in rule order: name, email, birth date.
        """
        errors = []
        if not self.name.strip():
            errors.append("Name is required")
        if not EMAIL_PATTERN.match(self.email):
            errors.append("Email must be valid")
        if parse_date(self.birth_date) is None:
            errors.append("Birth date must be a valid date")
        return ClientValidation(is_valid=not errors, errors=errors)

    def to_plain(self) -> dict[str, Any]:
        """Flat representation used for single-client responses."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "birth_date": self.birth_date,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def to_formatted(self, sales: list[SaleProjection]) -> FormattedClient:
        """Nested representation used in client listings, sales kept in the given order."""
        return FormattedClient(
            info=ClientInfo(
                full_name=self.name,
                details=ClientDetails(email=self.email, birth_date=self.birth_date),
            ),
            duplicate=ClientDuplicate(full_name=self.name),
            statistics=ClientStatistics(
                sales=[SaleStatistic(date=sale.sale_date, amount=sale.value) for sale in sales]
            ),
        )


class Sale(BaseModel):
    """Domain model for a sale made to a client."""
    id: int | None = None
    client_id: int
    value: float = Field(..., ge=0)
    sale_date: date
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class ClientSaleRow(BaseModel):
    """One row of the clients/sales outer join; sale fields are None for clients without sales."""
    client: Client
    sale_date: str | None = None
    value: float | None = None


class ClientSales(BaseModel):
    """A client and its sales, regrouped from join rows."""
    client: Client
    sales: list[SaleProjection] = Field(default_factory=list)


class ClientFilter(BaseModel):
    """Case-insensitive substring filters; both must match when both are set."""
    name: str | None = None
    email: str | None = None

    @field_validator("name", "email")
    @classmethod
    def blank_as_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


def _positive_int(value: Any, default: int) -> int:
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


class Pagination(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def parse(
        cls,
        page: Any,
        limit: Any,
        *,
        default_page: int = 1,
        default_limit: int = 10,
        max_limit: int = 100,
    ) -> "Pagination":
        """
        Build pagination from raw query values.

        Missing, non-numeric or non-positive values fall back to the defaults,
        the limit is capped at max_limit and the page is capped so the offset
        fits a SQL integer.
        """
        limit = min(_positive_int(limit, default_limit), max_limit)
        page = min(_positive_int(page, default_page), MAX_SQL_INTEGER // limit + 1)
        return cls(page=page, limit=limit)


class ClientListData(BaseModel):
    clients: list[FormattedClient] = Field(default_factory=list)


class ClientListMeta(BaseModel):
    total: int
    page: int


class StatusMarker(BaseModel):
    status: str = "ok"


class ClientListEnvelope(BaseModel):
    """Paginated client listing: results, pagination metadata and a fixed status marker."""
    data: ClientListData
    meta: ClientListMeta
    redundant: StatusMarker = Field(default_factory=StatusMarker)


# =============================================================================
# Sales statistics
# =============================================================================

class DailySales(BaseModel):
    sale_date: str
    total_sales: float
    total_transactions: int


class TopVolumeClient(BaseModel):
    id: int
    name: str
    email: str
    total_volume: float


class TopAverageClient(BaseModel):
    id: int
    name: str
    email: str
    average_value: float
    total_sales: int


class TopFrequencyClient(BaseModel):
    id: int
    name: str
    email: str
    unique_days: int
    total_sales: int


class ClientStats(BaseModel):
    """Leading client by volume, by average sale value and by distinct purchase days."""
    top_volume_client: TopVolumeClient | None = None
    top_average_client: TopAverageClient | None = None
    top_frequency_client: TopFrequencyClient | None = None


class GeneralStats(BaseModel):
    total_clients: int
    total_sales: int
    total_revenue: float = 0.0
    average_sale_value: float = 0.0
