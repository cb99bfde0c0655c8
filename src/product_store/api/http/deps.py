"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.product_store.api.http.app_data import ApplicationDependencies
from src.product_store.core.services import DbSessionService, ProductService
from src.product_store.entities.product import ProductRepository, SqlProductRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a request-scoped database session.

    Repositories commit their own writes; the session is only closed here.
    """
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_repository(session: Session = Depends(get_session)) -> ProductRepository:
    """Get the product repository bound to the request session."""
    return SqlProductRepository(session)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    """Get the product service for the current request."""
    return ProductService(repository)
