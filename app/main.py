# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Pokedex API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, settings
from app.dependencies import get_pokemon_service
from app.exceptions import (
    PokedexException,
    pokedex_exception_handler,
    validation_exception_handler,
)
from app.routers import health, pokemons

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: Build the pokemon store so bad seed data fails fast
    - Shutdown: Nothing to release, the store is in memory
    """
    logger.info(f"Starting Pokedex API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    # Honour dependency overrides so tests don't build the real store
    service_factory = app.dependency_overrides.get(get_pokemon_service, get_pokemon_service)
    service = service_factory()
    logger.info(f"Pokemon store ready with {service.count()} record(s)")

    yield

    logger.info("Shutting down Pokedex API")


# Create FastAPI application
app = FastAPI(
    title="Pokedex API",
    description="""
## In-memory Pokemon CRUD API

Create, read, update and delete pokemons held in process memory.
Nothing is persisted: restarting the server restores the seed data.

### Notes

- Pokemon ids are **not** unique. Lookups and updates use the first match,
  deletes remove every match.
- Looking up an unknown id returns `null`; updating or deleting one is a no-op.

### Quick Start

```bash
# List pokemons
curl http://localhost:8000/pokemons

# Create a pokemon
curl -X POST http://localhost:8000/pokemons \\
  -H "Content-Type: application/json" \\
  -d '{"id": 4, "name": "Eevee", "type": "Normal"}'

# Rename it
curl -X PUT http://localhost:8000/pokemons/4 \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Vaporeon", "type": "Water"}'

# Delete it
curl -X DELETE http://localhost:8000/pokemons/4
```
""",
    version=__version__,
    docs_url=settings.DOCS_URL,
    redoc_url=settings.REDOC_URL,
    openapi_url=settings.OPENAPI_URL,
    lifespan=lifespan,
    # Pokemon is both request and response body; publish one schema for it
    separate_input_output_schemas=False,
    openapi_tags=[
        {
            "name": "Pokemons",
            "description": "Create, read, update and delete pokemons",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

def add_cors_middleware(app: FastAPI, config: Settings) -> None:
    """
    Add CORS middleware - allows cross-origin requests.

    Production only allows CORS_ORIGINS; other environments allow any origin.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list if config.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


add_cors_middleware(app, settings)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(PokedexException)
async def handle_pokedex_exception(request: Request, exc: PokedexException):
    """Handle custom Pokedex exceptions."""
    logger.error(f"{exc.code}: {exc.message}")
    return await pokedex_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and path parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Pokemon CRUD endpoints
app.include_router(
    pokemons.router,
    prefix="/pokemons",
    tags=["Pokemons"]
)

# Health check endpoints
app.include_router(
    health.router,
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Pokedex API",
        "version": __version__,
        "docs": settings.DOCS_URL,
        "openapi": settings.OPENAPI_URL,
        "health": "/health",
    }
