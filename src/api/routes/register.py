"""
User registration route
"""

import logging
from fastapi import APIRouter, Depends, Request

from api.dependencies import get_registration_store
from models.registration import RegisteredUser, RegistrationResponse
from services.registration_store import RegistrationStore
from utils.error_handling import log_business_error, set_endpoint_context
from utils.request_fields import get_field

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/register", response_model=RegistrationResponse)
async def register(request: Request, store: RegistrationStore = Depends(get_registration_store)):
    """
    Register a username/password pair

    No password strength or duplicate-name check is made.
    """
    set_endpoint_context("register")
    user_name = get_field(request, "userName")
    password = get_field(request, "password")

    if user_name is None or password is None:
        log_business_error(
            "missing_parameters",
            "Registration requires userName and password",
            context={"has_user_name": user_name is not None, "has_password": password is not None},
            request=request
        )
        return RegistrationResponse(success=False)

    store.add_new_registered_user(RegisteredUser(name=user_name, password=password))
    return RegistrationResponse(success=True)
