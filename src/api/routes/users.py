"""
Users resource controller

Demonstrates the REST resource shape (index, store, show, update, replace,
destroy) on a User identified by name. Nothing is persisted.
"""

import logging
from fastapi import APIRouter, HTTPException

from models.user import User, UserUpdateRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
async def index():
    """List endpoint of the controller"""
    return {"controller": "UserController.index"}


@router.post("", response_model=User)
async def store(request: User):
    """Create a user from the request body and echo it"""
    logger.info(f"Created user '{request.name}'")
    return request


@router.get("/{name}", response_model=User)
async def show(name: str):
    """Show the user identified by name"""
    return User(name=name)


@router.patch("/{name}", response_model=User)
async def update(name: str, request: UserUpdateRequest):
    """Apply the provided fields to the user"""
    user = User(name=name)
    if request.name is not None:
        user.name = request.name
    return user


@router.put("/{name}", response_model=User)
async def replace(name: str, request: User):
    """Replace the user with the request body"""
    if not request.name:
        raise HTTPException(status_code=400, detail="User name must not be empty")
    logger.info(f"Replaced user '{name}' with '{request.name}'")
    return request


@router.delete("/{name}", response_model=User)
async def destroy(name: str):
    """Delete the user and return it"""
    logger.info(f"Deleted user '{name}'")
    return User(name=name)
