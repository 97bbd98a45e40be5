"""
Configuration settings for the Todo & Registration Backend
"""

import os
import logging
from pathlib import Path

# Configure logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Project root holds Resources/ and Localization/
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Environment configuration
ENV = os.getenv("ENV", "DEV")  # DEV, QA or PROD
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))
# Signs the session cookie
APP_KEY = os.getenv("APP_KEY", "dev-app-key-change-in-production")
SESSION_COOKIE = os.getenv("SESSION_COOKIE", "vapor-session")

# Response header added to every request by VersionHeaderMiddleware
API_VERSION_HEADER = os.getenv("API_VERSION_HEADER", "API v1.0")

# Views and localization tables
VIEWS_DIR = Path(os.getenv("RESOURCES_DIR", BASE_DIR / "Resources" / "Views"))
LOCALIZATION_DIR = Path(os.getenv("LOCALIZATION_DIR", BASE_DIR / "Localization"))

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]

logger.info(f"Environment: {ENV}")

if "APP_KEY" not in os.environ:
    logger.warning("APP_KEY not set - sessions are signed with the development key")
