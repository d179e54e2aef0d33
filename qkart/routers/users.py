"""User Router - delivery address of the authenticated user."""
from fastapi import APIRouter, Depends

from qkart.errors import QKartError
from qkart.services.domains import UsersDomain
from qkart.services.models import User

from .deps import get_current_user, get_users_domain, to_http_exception
from .models import SetAddressRequest

router = APIRouter(prefix="/users", tags=["users"])


@router.put("/me/address")
async def set_address(
    request: SetAddressRequest,
    user: User = Depends(get_current_user),
    users: UsersDomain = Depends(get_users_domain),
):
    try:
        address = await users.set_address(user, request.address)
    except QKartError as e:
        raise to_http_exception(e)
    return {"address": address}
