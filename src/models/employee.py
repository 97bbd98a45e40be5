"""
Employee model used by the validation example route
"""

from pydantic import BaseModel, Field

# Alphanumeric, between 5 and 20 characters
NAME_PATTERN = r"^[A-Za-z0-9]{5,20}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class Employee(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN, description="Employee e-mail address")
    name: str = Field(..., pattern=NAME_PATTERN, description="Alphanumeric name, 5-20 characters")
