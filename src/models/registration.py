"""
Registration Pydantic models
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisteredUser(BaseModel):
    """Username/password pair. The password is kept as plaintext."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    password: str = Field(alias="pass")


class RegistrationResponse(BaseModel):
    success: bool
