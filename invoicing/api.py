"""REST API endpoints for the invoicing back-end.

Every entity type gets the same five routes under ``/api/<name>``. Reads
are served straight from the in-memory collections; mutations write the
backing file, so they run in a worker thread.
"""

import asyncio
import threading
from typing import Callable, Dict, List, Type

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel

from invoicing.config import get_entity_file
from invoicing.errors import NotFoundError, ValidationFailedError
from invoicing.models.domain import Category, Customer, Entity, Invoice, Product
from invoicing.models.dto import CategoryDTO, CustomerDTO, ErrorResponse, InvoiceDTO, ProductDTO
from invoicing.repositories.json_file_repository import JsonFileRepository
from invoicing.services import (
    CategoryService,
    CustomerService,
    EntityService,
    InvoiceService,
    ProductService,
)

router = APIRouter()

_repositories: Dict[str, JsonFileRepository] = {}
_services: Dict[str, EntityService] = {}
_registry_lock = threading.RLock()


def get_repository(name: str, entity_type: Type[Entity]) -> JsonFileRepository:
    """Get the process-wide repository for an entity type, creating it on first use."""
    with _registry_lock:
        repo = _repositories.get(name)
        if repo is None:
            repo = JsonFileRepository(get_entity_file(name), entity_type)
            _repositories[name] = repo
        return repo


def _get_service(name: str, entity_type: Type[Entity], service_type: Type[EntityService]) -> EntityService:
    with _registry_lock:
        service = _services.get(name)
        if service is None:
            service = service_type(get_repository(name, entity_type))
            _services[name] = service
        return service


def get_category_service() -> CategoryService:
    """Get category service instance."""
    return _get_service("categories", Category, CategoryService)


def get_customer_service() -> CustomerService:
    """Get customer service instance."""
    return _get_service("customers", Customer, CustomerService)


def get_invoice_service() -> InvoiceService:
    """Get invoice service instance."""
    return _get_service("invoices", Invoice, InvoiceService)


def get_product_service() -> ProductService:
    """Get product service instance."""
    return _get_service("products", Product, ProductService)


def reset_dependencies() -> None:
    """Drop all repository and service singletons (next request reloads from disk)."""
    with _registry_lock:
        _repositories.clear()
        _services.clear()


def _register_crud_routes(
    name: str,
    label: str,
    dto_type: Type[BaseModel],
    service_getter: Callable[[], EntityService],
) -> None:
    """Add list/get/create/update/delete routes for one entity type."""
    get_route = f"get_{name}"
    not_found = {404: {"model": ErrorResponse}}
    bad_request = {400: {"model": ErrorResponse}}

    @router.get(f"/{name}", response_model=List[dto_type], name=f"list_{name}", tags=[name])
    async def list_entities(service: EntityService = Depends(service_getter)):
        return service.get_all()

    @router.get(
        f"/{name}/{{entity_id}}",
        response_model=dto_type,
        name=get_route,
        tags=[name],
        responses=not_found,
    )
    async def get_entity(entity_id: int, service: EntityService = Depends(service_getter)):
        entity = service.get_by_id(entity_id)

        if entity is None:
            raise NotFoundError(f"{label} not found")

        return entity

    @router.post(
        f"/{name}",
        response_model=dto_type,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{name}",
        tags=[name],
        responses=bad_request,
    )
    async def create_entity(
        payload: dto_type,
        request: Request,
        response: Response,
        service: EntityService = Depends(service_getter),
    ):
        created = await asyncio.to_thread(service.add, payload)
        response.headers["Location"] = str(request.url_for(get_route, entity_id=created.id))
        return created

    @router.put(
        f"/{name}/{{entity_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"update_{name}",
        tags=[name],
        responses={**bad_request, **not_found},
    )
    async def update_entity(
        entity_id: int,
        payload: dto_type,
        service: EntityService = Depends(service_getter),
    ):
        if payload.id != entity_id:
            raise ValidationFailedError(f"{label} ID mismatch")

        updated = await asyncio.to_thread(service.update, payload)

        if not updated:
            raise NotFoundError(f"{label} not found")

        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        f"/{name}/{{entity_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{name}",
        tags=[name],
        responses=not_found,
    )
    async def delete_entity(entity_id: int, service: EntityService = Depends(service_getter)):
        deleted = await asyncio.to_thread(service.delete, entity_id)

        if not deleted:
            raise NotFoundError(f"{label} not found")

        return Response(status_code=status.HTTP_204_NO_CONTENT)


_register_crud_routes("categories", "Category", CategoryDTO, get_category_service)
_register_crud_routes("customers", "Customer", CustomerDTO, get_customer_service)
_register_crud_routes("invoices", "Invoice", InvoiceDTO, get_invoice_service)
_register_crud_routes("products", "Product", ProductDTO, get_product_service)
