"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (via ``python-dotenv``) so that the Cosmos DB endpoint and
key can live outside the shell environment during development.
Defaults are provided for all fields except the Cosmos credentials,
which are only required when the Cosmos backend is selected.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "static"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Recipe Book API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # ``cosmos`` talks to Azure Cosmos DB; ``memory`` keeps recipes in
    # process and is meant for local development only.
    store_backend: str = os.getenv("STORE_BACKEND", "cosmos")

    cosmos_endpoint: str = os.getenv("COSMOS_ENDPOINT", "")
    cosmos_key: str = os.getenv("COSMOS_KEY", "")
    cosmos_database: str = os.getenv("COSMOS_DATABASE", "RecipeBookDB")
    cosmos_container: str = os.getenv("COSMOS_CONTAINER", "Recipes")
    # When enabled the database and container (partitioned on /course)
    # are created at startup if they do not exist yet.
    cosmos_create_container: bool = _env_flag("COSMOS_CREATE_CONTAINER")

    static_dir: str = os.getenv("STATIC_DIR", str(STATIC_DIR))

    # Base URL used by the command line client.
    client_base_url: str = os.getenv("RECIPE_BOOK_URL", "http://localhost:3000")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
