"""
Todo-related Pydantic models
"""

from pydantic import BaseModel


class Todo(BaseModel):
    """A single todo item, keyed by its caller-supplied id"""
    id: int
    name: str
    description: str
    notes: str
    completed: bool
    synced: bool


class MessageResponse(BaseModel):
    message: str
