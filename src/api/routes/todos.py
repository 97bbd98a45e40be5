"""
Todo list API routes

Fields are read from request headers (query parameters as a fallback).
Every outcome answers with HTTP 200; failures are signalled by the payload:
a `message` describing what is missing.
"""

import logging
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Request

from api.dependencies import get_todo_store
from models.todo import Todo, MessageResponse
from services.todo_store import TodoStore
from utils.error_handling import log_business_error, set_endpoint_context
from utils.request_fields import get_field, get_int_field, get_bool_field

router = APIRouter()
logger = logging.getLogger(__name__)

MISSING_PARAMETERS = "Please include mandatory parameters"
MISSING_ID = "Please provide the id of todo item"

TODO_TEXT_FIELDS = ("name", "description", "notes")


def todo_from_request(request: Request) -> Optional[Todo]:
    """
    Build a Todo from the request fields

    Returns:
        The Todo, or None if any field is missing or does not parse
    """
    todo_id = get_int_field(request, "id")
    texts = {field: get_field(request, field) for field in TODO_TEXT_FIELDS}
    completed = get_bool_field(request, "completed")
    synced = get_bool_field(request, "synced")

    if todo_id is None or completed is None or synced is None or None in texts.values():
        return None

    return Todo(id=todo_id, completed=completed, synced=synced, **texts)


def _reject(request: Request, message: str) -> MessageResponse:
    log_business_error("missing_parameters", message, request=request)
    return MessageResponse(message=message)


@router.post("/postTodo", response_model=Union[List[Todo], MessageResponse])
async def post_todo(request: Request, store: TodoStore = Depends(get_todo_store)):
    """Add a todo item, or replace the one with the same id, and return all items"""
    set_endpoint_context("postTodo")
    item = todo_from_request(request)
    if item is None:
        return _reject(request, MISSING_PARAMETERS)

    store.add_or_update(item)
    return store.list_items()


@router.get("/todos", response_model=List[Todo])
async def list_todos(store: TodoStore = Depends(get_todo_store)):
    """List all todo items"""
    return store.list_items()


@router.get("/todo", response_model=Union[List[Todo], MessageResponse])
async def get_todo(request: Request, store: TodoStore = Depends(get_todo_store)):
    """Get a specific todo item, as a list of zero or one items"""
    set_endpoint_context("todo")
    todo_id = get_int_field(request, "id")
    if todo_id is None:
        return _reject(request, MISSING_ID)

    return store.get(todo_id)


@router.delete("/deleteTodo", response_model=MessageResponse)
async def delete_todo(request: Request, store: TodoStore = Depends(get_todo_store)):
    """Delete a specific todo item"""
    set_endpoint_context("deleteTodo")
    todo_id = get_int_field(request, "id")
    if todo_id is None:
        return _reject(request, MISSING_ID)

    return MessageResponse(message=store.delete(todo_id))


@router.delete("/deleteAll", response_model=MessageResponse)
async def delete_all(store: TodoStore = Depends(get_todo_store)):
    """Delete all todo items"""
    return MessageResponse(message=store.delete_all())


@router.post("/updateTodo", response_model=MessageResponse)
async def update_todo(request: Request, store: TodoStore = Depends(get_todo_store)):
    """Update an existing todo item. Unknown ids are reported, not created."""
    set_endpoint_context("updateTodo")
    item = todo_from_request(request)
    if item is None:
        return _reject(request, MISSING_PARAMETERS)

    return MessageResponse(message=store.update(item))
