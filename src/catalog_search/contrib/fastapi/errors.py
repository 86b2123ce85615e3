"""Map catalog-search exceptions onto HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...exceptions import (
    CatalogSearchError,
    InvalidCriteriaError,
    NotFoundError,
    StoreError,
)

STATUS_CODES: dict[type[CatalogSearchError], int] = {
    NotFoundError: 404,
    InvalidCriteriaError: 422,
    StoreError: 503,
}


def status_code_for(exc: CatalogSearchError) -> int:
    for exc_type, status_code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def catalog_search_error_handler(
    request: Request, exc: CatalogSearchError
) -> JSONResponse:
    return JSONResponse(status_code=status_code_for(exc), content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(
        CatalogSearchError,
        catalog_search_error_handler,  # type: ignore[arg-type]
    )
