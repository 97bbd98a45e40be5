"""
Todo & Registration Backend API Server
Todo list CRUD, user registration and framework example routes
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from config.settings import ALLOWED_ORIGINS, API_VERSION_HEADER, APP_KEY, LOCALIZATION_DIR, SESSION_COOKIE, VIEWS_DIR
from api.routes import health, todos, register, users, examples
from middleware.version_middleware import VersionHeaderMiddleware
from services.todo_store import TodoStore
from services.registration_store import RegistrationStore
from utils.error_handling import setup_error_handling
from utils.localization import Localization

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the application with its own, empty stores"""
    app = FastAPI(
        title="Todo & Registration Backend",
        description="Todo list CRUD API, user registration and example routes",
        version="1.0.0"
    )

    # Shared state, injected into handlers through api.dependencies
    app.state.todo_store = TodoStore()
    app.state.registration_store = RegistrationStore()
    app.state.localization = Localization(LOCALIZATION_DIR)
    app.state.templates = Jinja2Templates(directory=str(VIEWS_DIR))

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(VersionHeaderMiddleware, version=API_VERSION_HEADER)
    app.add_middleware(SessionMiddleware, secret_key=APP_KEY, session_cookie=SESSION_COOKIE)

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(examples.router, tags=["Examples"])
    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(todos.router, tags=["Todos"])
    app.include_router(register.router, tags=["Registration"])

    logger.info("Application created")
    return app


app = create_app()

# Server startup is handled by main.py at the project root
