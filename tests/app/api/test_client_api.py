from datetime import date
from typing import cast

import pytest
from httpx import HTTPStatusError

from src.app.core.domain.models import Sale
from src.client import ClientRequest


def ana() -> ClientRequest:
    return ClientRequest(name="Ana", email="ana@x.com", birth_date="1992-05-01")


@pytest.mark.asyncio
async def test_create_client(toystore_client):
    """Test creating a client via API."""
    response = await toystore_client.create_client(ana())

    assert response.id is not None
    assert response.name == "Ana"
    assert response.email == "ana@x.com"
    assert response.birth_date == "1992-05-01"
    assert response.created_at is not None
    assert response.updated_at is not None


@pytest.mark.asyncio
async def test_create_client_returns_201(toystore_client):
    response = await toystore_client.client.post("/api/v1/clients/", json=ana().model_dump())

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_create_client_invalid_fields(toystore_client):
    """Every violated rule is listed in the 400 body."""
    request = ClientRequest(name="", email="nope", birth_date="31/12/1990")

    with pytest.raises(HTTPStatusError) as exc_info:
        await toystore_client.create_client(request)

    error = cast(HTTPStatusError, exc_info.value)
    assert error.response.status_code == 400
    assert error.response.json()["detail"] == [
        "Name is required",
        "Email must be valid",
        "Birth date must be a valid date",
    ]


@pytest.mark.asyncio
async def test_create_client_missing_fields(toystore_client):
    response = await toystore_client.client.post("/api/v1/clients/", json={})

    assert response.status_code == 400
    assert len(response.json()["detail"]) == 3


@pytest.mark.asyncio
async def test_create_duplicate_email(toystore_client):
    """Test creating a client with duplicate email fails."""
    await toystore_client.create_client(ana())

    with pytest.raises(HTTPStatusError) as exc_info:
        await toystore_client.create_client(
            ClientRequest(name="Another Ana", email="ana@x.com", birth_date="1990-01-01")
        )

    error = cast(HTTPStatusError, exc_info.value)
    assert error.response.status_code == 409
    assert "already exists" in error.response.json()["detail"]


@pytest.mark.asyncio
async def test_get_client(toystore_client):
    created = await toystore_client.create_client(ana())

    retrieved = await toystore_client.get_client(created.id)

    assert retrieved == created


@pytest.mark.asyncio
async def test_get_client_not_found(toystore_client):
    with pytest.raises(HTTPStatusError) as exc_info:
        await toystore_client.get_client(99999)

    error = cast(HTTPStatusError, exc_info.value)
    assert error.response.status_code == 404
    assert "not found" in error.response.json()["detail"]


@pytest.mark.asyncio
async def test_update_client(toystore_client):
    created = await toystore_client.create_client(ana())

    updated = await toystore_client.update_client(
        created.id, ClientRequest(name="Ana Maria", email="ana.maria@x.com", birth_date="1992-05-02")
    )

    assert updated.id == created.id
    assert updated.name == "Ana Maria"
    assert updated.email == "ana.maria@x.com"
    assert updated.birth_date == "1992-05-02"


@pytest.mark.asyncio
async def test_update_client_invalid_fields(toystore_client):
    created = await toystore_client.create_client(ana())

    with pytest.raises(HTTPStatusError) as exc_info:
        await toystore_client.update_client(created.id, ClientRequest(name="Ana", email="bad", birth_date="1992-05-01"))

    error = cast(HTTPStatusError, exc_info.value)
    assert error.response.status_code == 400
    assert error.response.json()["detail"] == ["Email must be valid"]


@pytest.mark.asyncio
async def test_update_client_not_found(toystore_client):
    with pytest.raises(HTTPStatusError) as exc_info:
        await toystore_client.update_client(99999, ana())

    assert cast(HTTPStatusError, exc_info.value).response.status_code == 404


@pytest.mark.asyncio
async def test_update_client_email_taken(toystore_client):
    await toystore_client.create_client(ana())
    bruno = await toystore_client.create_client(
        ClientRequest(name="Bruno", email="bruno@x.com", birth_date="1990-01-01")
    )

    with pytest.raises(HTTPStatusError) as exc_info:
        await toystore_client.update_client(
            bruno.id, ClientRequest(name="Bruno", email="ana@x.com", birth_date="1990-01-01")
        )

    assert cast(HTTPStatusError, exc_info.value).response.status_code == 409


@pytest.mark.asyncio
async def test_delete_client(toystore_client):
    created = await toystore_client.create_client(ana())

    response = await toystore_client.client.delete(f"/api/v1/clients/{created.id}")

    assert response.status_code == 204
    with pytest.raises(HTTPStatusError) as exc_info:
        await toystore_client.get_client(created.id)
    assert cast(HTTPStatusError, exc_info.value).response.status_code == 404


@pytest.mark.asyncio
async def test_delete_client_not_found(toystore_client):
    await toystore_client.create_client(ana())

    with pytest.raises(HTTPStatusError) as exc_info:
        await toystore_client.delete_client(99999)

    assert cast(HTTPStatusError, exc_info.value).response.status_code == 404
    listing = await toystore_client.list_clients()
    assert listing.meta.total == 1


@pytest.mark.asyncio
async def test_list_clients_wire_format(toystore_client, sale_repository):
    """The list body keeps its nested keys and duplicated name."""
    created = await toystore_client.create_client(ana())
    await sale_repository.create(Sale(client_id=created.id, value=150.0, sale_date=date(2024, 1, 1)))

    response = await toystore_client.client.get("/api/v1/clients/")

    assert response.status_code == 200
    assert response.json() == {
        "data": {
            "clientes": [
                {
                    "info": {
                        "nomeCompleto": "Ana",
                        "detalhes": {"email": "ana@x.com", "nascimento": "1992-05-01"},
                    },
                    "duplicado": {"nomeCompleto": "Ana"},
                    "estatisticas": {"vendas": [{"data": "2024-01-01", "valor": 150.0}]},
                }
            ]
        },
        "meta": {"registroTotal": 1, "pagina": 1},
        "redundante": {"status": "ok"},
    }


@pytest.mark.asyncio
async def test_list_clients_filters_and_paginates(toystore_client):
    for name in ["Joana", "John", "Mary", "Jonas"]:
        await toystore_client.create_client(
            ClientRequest(name=name, email=f"{name.lower()}@x.com", birth_date="1990-01-01")
        )

    listing = await toystore_client.list_clients(name="jo", page=2, limit=2)

    assert listing.meta.total == 3
    assert listing.meta.page == 2
    assert [c.info.full_name for c in listing.data.clients] == ["Jonas"]
    assert listing.redundant.status == "ok"


@pytest.mark.asyncio
async def test_list_clients_ignores_malformed_paging(toystore_client):
    await toystore_client.create_client(ana())

    response = await toystore_client.client.get("/api/v1/clients/", params={"page": "abc", "limit": "-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["meta"] == {"registroTotal": 1, "pagina": 1}
    assert len(body["data"]["clientes"]) == 1


@pytest.mark.asyncio
async def test_list_clients_empty(toystore_client):
    listing = await toystore_client.list_clients()

    assert listing.data.clients == []
    assert listing.meta.total == 0
    assert listing.meta.page == 1


@pytest.mark.asyncio
async def test_health(toystore_client):
    response = await toystore_client.client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_list_clients_huge_page_number(toystore_client):
    await toystore_client.create_client(ana())

    response = await toystore_client.client.get("/api/v1/clients/", params={"page": "99999999999999999999"})

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["clientes"] == []
    assert body["meta"]["registroTotal"] == 1
