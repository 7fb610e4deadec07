import pytest

from src.app.infrastructure.seed import seed_sample_data


@pytest.mark.asyncio
async def test_stats_on_empty_store(toystore_client):
    days = await toystore_client.sales_by_day()
    rankings = await toystore_client.client_stats()
    general = await toystore_client.general_stats()

    assert days == []
    assert rankings.top_volume_client is None
    assert general.total_clients == 0
    assert general.total_revenue == 0.0


@pytest.mark.asyncio
async def test_client_stats_wire_keys_when_empty(toystore_client):
    response = await toystore_client.client.get("/api/v1/stats/client-stats")

    assert response.status_code == 200
    assert response.json() == {
        "topVolumeClient": None,
        "topAverageClient": None,
        "topFrequencyClient": None,
    }


@pytest.mark.asyncio
async def test_stats_on_seeded_store(toystore_client, client_repository, sale_repository):
    # Arrange
    await seed_sample_data(client_repository, sale_repository)

    # Act
    days = await toystore_client.sales_by_day()
    rankings = await toystore_client.client_stats()
    general = await toystore_client.general_stats()

    # Assert
    assert [d.sale_date for d in days] == ["2024-01-01", "2024-01-15", "2024-02-01"]
    assert all(d.total_transactions == 4 for d in days)
    assert rankings.top_volume_client.total_volume == pytest.approx(425.5)
    assert rankings.top_frequency_client.unique_days == 3
    assert general.total_clients == 4
    assert general.total_sales == 12


@pytest.mark.asyncio
async def test_general_stats_wire_keys(toystore_client, client_repository, sale_repository):
    await seed_sample_data(client_repository, sale_repository)

    response = await toystore_client.client.get("/api/v1/stats/general")

    body = response.json()
    assert set(body) == {"totalClients", "totalSales", "totalRevenue", "averageSaleValue"}
    assert body["totalRevenue"] == pytest.approx(1702.0)
