"""
Version header middleware - stamps every response with the API version
"""

import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from config.settings import API_VERSION_HEADER

logger = logging.getLogger(__name__)


class VersionHeaderMiddleware(BaseHTTPMiddleware):
    """Adds a `Version` header to all outgoing responses"""

    def __init__(self, app, version: str = API_VERSION_HEADER):
        super().__init__(app)
        self.version = version

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["Version"] = self.version
        return response
