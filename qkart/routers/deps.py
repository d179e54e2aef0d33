"""
Shared Dependencies for Routers

Everything is resolved from app.state, which the app factory fills in.
"""

from fastapi import Depends, Header, HTTPException, Request

from qkart.cart import CartManager
from qkart.errors import (
    ERROR_UNAUTHENTICATED,
    ConflictError,
    InternalFailureError,
    InvalidRequestError,
    NotFoundError,
    QKartError,
    StaleRecordError,
)
from qkart.logging import get_logger
from qkart.services.database import Database
from qkart.services.domains import ProductsDomain, UsersDomain
from qkart.services.models import User

logger = get_logger(__name__)

# Order matters: StaleRecordError is a ConflictError
_STATUS_BY_ERROR: tuple[tuple[type[QKartError], int], ...] = (
    (NotFoundError, 404),
    (InvalidRequestError, 400),
    (StaleRecordError, 409),
    (ConflictError, 400),
    (InternalFailureError, 500),
)


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_cart_manager(db: Database = Depends(get_database)) -> CartManager:
    return db.cart_manager


def get_products_domain(db: Database = Depends(get_database)) -> ProductsDomain:
    return db.products_domain


def get_users_domain(db: Database = Depends(get_database)) -> UsersDomain:
    return db.users_domain


async def get_current_user(
    x_user_email: str | None = Header(default=None),
    users: UsersDomain = Depends(get_users_domain),
) -> User:
    """Resolve the caller from the X-User-Email header.

    Stands in for the real authentication layer, which is not part of this service.
    """
    if not x_user_email:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHENTICATED)

    user = await users.get_user_by_email(x_user_email)
    if user is None:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHENTICATED)
    return user


def to_http_exception(exc: QKartError) -> HTTPException:
    """Map a service error to its HTTP status, keeping the fixed message."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=exc.message)
    logger.error(f"Unmapped service error {type(exc).__name__}: {exc.message}")
    return HTTPException(status_code=500, detail=exc.message)
