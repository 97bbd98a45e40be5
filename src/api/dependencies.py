"""
FastAPI dependencies giving route handlers access to the app's stores
"""

from fastapi import Request

from services.todo_store import TodoStore
from services.registration_store import RegistrationStore
from utils.localization import Localization


def get_todo_store(request: Request) -> TodoStore:
    return request.app.state.todo_store


def get_registration_store(request: Request) -> RegistrationStore:
    return request.app.state.registration_store


def get_localization(request: Request) -> Localization:
    return request.app.state.localization


def get_templates(request: Request):
    return request.app.state.templates
