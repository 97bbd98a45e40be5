"""
User models for the users resource controller
"""

from typing import Optional
from pydantic import BaseModel


class User(BaseModel):
    name: str


class UserUpdateRequest(BaseModel):
    name: Optional[str] = None
