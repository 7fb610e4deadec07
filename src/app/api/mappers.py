"""Mappers for converting between domain models and API schemas."""
from typing import Any

from src.app.core.domain.models import (
    ClientListEnvelope,
    ClientStats,
    DailySales,
    FormattedClient,
    GeneralStats,
)
from src.client.schemas import (
    ClientDetailsResponse,
    ClientDuplicateResponse,
    ClientInfoResponse,
    ClientListDataResponse,
    ClientListMetaResponse,
    ClientListResponse,
    ClientResponse,
    ClientStatisticsResponse,
    ClientStatsResponse,
    DailySalesResponse,
    FormattedClientResponse,
    GeneralStatsResponse,
    SaleStatisticResponse,
    StatusMarkerResponse,
    TopAverageClientResponse,
    TopFrequencyClientResponse,
    TopVolumeClientResponse,
)


def to_client_response(client: dict[str, Any]) -> ClientResponse:
    """
    Convert a plain client record to ClientResponse API schema.

    Args:
        client: Output of Client.to_plain()

    Returns:
        API response schema
    """
    return ClientResponse(**client)


def to_formatted_client_response(client: FormattedClient) -> FormattedClientResponse:
    return FormattedClientResponse(
        info=ClientInfoResponse(
            full_name=client.info.full_name,
            details=ClientDetailsResponse(
                email=client.info.details.email,
                birth_date=client.info.details.birth_date,
            ),
        ),
        duplicate=ClientDuplicateResponse(full_name=client.duplicate.full_name),
        statistics=ClientStatisticsResponse(
            sales=[
                SaleStatisticResponse(date=sale.date, amount=sale.amount)
                for sale in client.statistics.sales
            ]
        ),
    )


def to_client_list_response(envelope: ClientListEnvelope) -> ClientListResponse:
    """
    Convert a ClientListEnvelope domain model to ClientListResponse API schema.

    Args:
        envelope: Domain model

    Returns:
        API response schema
    """
    return ClientListResponse(
        data=ClientListDataResponse(
            clients=[to_formatted_client_response(client) for client in envelope.data.clients]
        ),
        meta=ClientListMetaResponse(total=envelope.meta.total, page=envelope.meta.page),
        redundant=StatusMarkerResponse(status=envelope.redundant.status),
    )


def to_daily_sales_response(daily: DailySales) -> DailySalesResponse:
    return DailySalesResponse(**daily.model_dump())


def to_client_stats_response(stats: ClientStats) -> ClientStatsResponse:
    """
    Convert ClientStats to its API schema, keeping missing rankings as None.
    """
    return ClientStatsResponse(
        top_volume_client=(
            TopVolumeClientResponse(**stats.top_volume_client.model_dump())
            if stats.top_volume_client else None
        ),
        top_average_client=(
            TopAverageClientResponse(**stats.top_average_client.model_dump())
            if stats.top_average_client else None
        ),
        top_frequency_client=(
            TopFrequencyClientResponse(**stats.top_frequency_client.model_dump())
            if stats.top_frequency_client else None
        ),
    )


def to_general_stats_response(stats: GeneralStats) -> GeneralStatsResponse:
    return GeneralStatsResponse(
        total_clients=stats.total_clients,
        total_sales=stats.total_sales,
        total_revenue=stats.total_revenue,
        average_sale_value=stats.average_sale_value,
    )
