"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter, Depends

from api.dependencies import get_todo_store, get_registration_store
from config.settings import ENV
from services.todo_store import TodoStore
from services.registration_store import RegistrationStore

router = APIRouter()


@router.get("/health")
async def health_check(
    todo_store: TodoStore = Depends(get_todo_store),
    registration_store: RegistrationStore = Depends(get_registration_store)
):
    """Health check with in-memory store sizes"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "environment": ENV,
        "todos": len(todo_store),
        "registered_users": len(registration_store)
    }
