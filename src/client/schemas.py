"""API schemas for client and statistics requests and responses.

List and statistics responses keep the field names existing consumers read
(`clientes`, `registroTotal`, `topVolumeClient`, ...). Python code uses the
snake_case attribute names; the aliases are what goes over the wire.
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClientRequest(BaseModel):
    """
    Request schema for creating or replacing a client.

    Fields are not constrained here: the service validates them and reports
    every violated rule at once.
    """
    name: str = Field(default="", description="Full name, required")
    email: str = Field(default="", description="Email address, must be unique")
    birth_date: str = Field(default="", description="Birth date (YYYY-MM-DD)")

    @field_validator("name", "email", "birth_date", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v


class ClientResponse(BaseModel):
    """Response schema for client data returned by the API."""
    id: int
    name: str
    email: str
    birth_date: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)


class SaleStatisticResponse(_WireModel):
    date: str = Field(..., alias="data", description="Sale date")
    amount: float = Field(..., alias="valor", description="Sale value")


class ClientDetailsResponse(_WireModel):
    email: str
    birth_date: str = Field(..., alias="nascimento")


class ClientInfoResponse(_WireModel):
    full_name: str = Field(..., alias="nomeCompleto")
    details: ClientDetailsResponse = Field(..., alias="detalhes")


class ClientDuplicateResponse(_WireModel):
    full_name: str = Field(..., alias="nomeCompleto")


class ClientStatisticsResponse(_WireModel):
    sales: list[SaleStatisticResponse] = Field(default_factory=list, alias="vendas")


class FormattedClientResponse(_WireModel):
    """One client in a list response."""
    info: ClientInfoResponse
    duplicate: ClientDuplicateResponse = Field(..., alias="duplicado")
    statistics: ClientStatisticsResponse = Field(..., alias="estatisticas")


class ClientListDataResponse(_WireModel):
    clients: list[FormattedClientResponse] = Field(default_factory=list, alias="clientes")


class ClientListMetaResponse(_WireModel):
    total: int = Field(..., alias="registroTotal", description="Clients matching the filters")
    page: int = Field(..., alias="pagina", description="Current page, 1-based")


class StatusMarkerResponse(_WireModel):
    status: str = "ok"


class ClientListResponse(_WireModel):
    """Response schema for a page of clients."""
    data: ClientListDataResponse
    meta: ClientListMetaResponse
    redundant: StatusMarkerResponse = Field(default_factory=StatusMarkerResponse, alias="redundante")


class DailySalesResponse(BaseModel):
    sale_date: str
    total_sales: float
    total_transactions: int


class TopVolumeClientResponse(BaseModel):
    id: int
    name: str
    email: str
    total_volume: float


class TopAverageClientResponse(BaseModel):
    id: int
    name: str
    email: str
    average_value: float
    total_sales: int


class TopFrequencyClientResponse(BaseModel):
    id: int
    name: str
    email: str
    unique_days: int
    total_sales: int


class ClientStatsResponse(_WireModel):
    top_volume_client: TopVolumeClientResponse | None = Field(default=None, alias="topVolumeClient")
    top_average_client: TopAverageClientResponse | None = Field(default=None, alias="topAverageClient")
    top_frequency_client: TopFrequencyClientResponse | None = Field(default=None, alias="topFrequencyClient")


class GeneralStatsResponse(_WireModel):
    total_clients: int = Field(..., alias="totalClients")
    total_sales: int = Field(..., alias="totalSales")
    total_revenue: float = Field(..., alias="totalRevenue")
    average_sale_value: float = Field(..., alias="averageSaleValue")
