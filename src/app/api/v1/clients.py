from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.domain.models import ClientFilter
from src.app.core.services.client_service import ClientService
from src.client.schemas import ClientRequest, ClientResponse, ClientListResponse
from src.app.api.mappers import to_client_response, to_client_list_response
from src.shared.exceptions import EntityNotFound, ConflictingEntityFound, EntityValidationFailed
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)


@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_client(
    request: ClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Create a new client."""
    try:
        client = await service.create_client(request)
        return to_client_response(client)
    except EntityValidationFailed as e:
        logger.warning(f"Rejected client payload: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.errors)
    except ConflictingEntityFound as e:
        logger.error(f"Failed to create client: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/", response_model=ClientListResponse)
@inject
async def list_clients(
    name: Annotated[str | None, Query(description="Case-insensitive substring of the name")] = None,
    email: Annotated[str | None, Query(description="Case-insensitive substring of the email")] = None,
    page: Annotated[str | None, Query(description="1-based page number")] = None,
    limit: Annotated[str | None, Query(description="Page size")] = None,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientListResponse:
    """
    List clients with their sales.

    Page and limit are taken as raw strings: values that are not positive
    integers fall back to the configured defaults instead of failing the request.
    """
    envelope = await service.list_clients(ClientFilter(name=name, email=email), page=page, limit=limit)
    return to_client_list_response(envelope)


@router.get("/{client_id}", response_model=ClientResponse)
@inject
async def get_client(
    client_id: int,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Get a client by ID."""
    try:
        client = await service.get_client(client_id)
        return to_client_response(client)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.put("/{client_id}", response_model=ClientResponse)
@inject
async def update_client(
    client_id: int,
    request: ClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Replace a client's name, email and birth date."""
    try:
        client = await service.update_client(client_id, request)
        return to_client_response(client)
    except EntityValidationFailed as e:
        logger.warning(f"Rejected client payload: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.errors)
    except (EntityNotFound, ConflictingEntityFound) as e:
        logger.error(f"Failed to update client {client_id}: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_client(
    client_id: int,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> Response:
    """Delete a client and its sales."""
    try:
        await service.delete_client(client_id)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
