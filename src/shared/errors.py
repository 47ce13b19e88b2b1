"""Error taxonomy shared by every bounded context.

Lookups that miss surface as Protean's ``ObjectNotFoundError`` (404).
``ProductNotFound`` narrows that to a product unknown to the catalogue
service, and ``Forbidden`` covers failed ownership checks as well as a 403
propagated from the users service.
"""

from enum import Enum

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ProteanException
from protean.integrations.fastapi import register_exception_handlers


class ErrorCode(Enum):
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"


def error_messages(code: ErrorCode, detail: str | None = None) -> dict:
    messages = {"code": [code.value]}
    if detail:
        messages["detail"] = [detail]
    return messages


class ProductNotFound(ObjectNotFoundError):
    """Referenced product does not exist in the catalogue service."""

    def __init__(self, product_id=None):
        detail = f"Product {product_id} does not exist" if product_id else None
        super().__init__(error_messages(ErrorCode.PRODUCT_NOT_FOUND, detail))


class Forbidden(ProteanException):
    """Caller is not allowed to act on the resource."""

    def __init__(self, detail: str | None = None):
        super().__init__(error_messages(ErrorCode.FORBIDDEN, detail))


def entity_not_found(entity_name: str, identifier) -> ObjectNotFoundError:
    return ObjectNotFoundError(error_messages(ErrorCode.ENTITY_NOT_FOUND, f"{entity_name} {identifier} does not exist"))


async def _not_found_handler(_request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": exc.messages})


async def _forbidden_handler(_request: Request, exc: Forbidden) -> JSONResponse:
    return JSONResponse(status_code=403, content={"error": exc.messages})


def register_error_handlers(app: FastAPI) -> None:
    """Install Protean's handlers plus the 404/403 mappings used here."""
    register_exception_handlers(app)
    app.add_exception_handler(ObjectNotFoundError, _not_found_handler)
    app.add_exception_handler(Forbidden, _forbidden_handler)
