# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the TodoList API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python scripts/start_api.py
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    TodoApiException,
    todo_api_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users, todos
from lib.store import UserStore

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

    Nothing to connect or clean up - the store is in memory - so this
    only logs startup and shutdown.
    """
    logger.info(f"Starting TodoList API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Free plan todo limit: {settings.FREE_PLAN_TODO_LIMIT}")

    yield

    logger.info(f"Shutting down TodoList API ({len(app.state.store)} users discarded)")


def create_app(store: UserStore | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: User store to serve from. A fresh empty store is created
            when omitted; tests pass their own to inspect it directly.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="TodoList API",
        description="""
## In-Memory Multi-User Todo API

Create users, upgrade them to the pro plan, and manage their todos.

### How It Works

1. **Create a User** - `POST /users` with a name and a unique username
2. **Send the Username** - todo endpoints read the `username` header
3. **Manage Todos** - create, update, complete and delete
4. **Go Pro** - free users can hold 10 todos; pro users have no limit

Data lives in memory and is lost on restart.

### Quick Start

```bash
# 1. Create user
curl -X POST http://localhost:3333/users \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Ana", "username": "ana"}'

# 2. Create todo
curl -X POST http://localhost:3333/todos \\
  -H "Content-Type: application/json" -H "username: ana" \\
  -d '{"title": "buy milk", "deadline": "2025-01-01"}'

# 3. List todos
curl http://localhost:3333/todos -H "username: ana"
```
""",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create users and activate the pro plan",
            },
            {
                "name": "Todos",
                "description": "Manage the todos of the user in the `username` header",
            },
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
        ],
    )

    app.state.store = store if store is not None else UserStore()

    # =========================================================================
    # Middleware
    # =========================================================================

    # CORS middleware - allows cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(TodoApiException, todo_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred"}
        )

    # =========================================================================
    # Routers
    # =========================================================================

    # User endpoints
    app.include_router(
        users.router,
        prefix="/users",
        tags=["Users"]
    )

    # Todo endpoints
    app.include_router(
        todos.router,
        prefix="/todos",
        tags=["Todos"]
    )

    # Health check endpoints
    app.include_router(
        health.router,
        tags=["Health"]
    )

    # =========================================================================
    # Root Endpoint
    # =========================================================================

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "TodoList API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


# Create FastAPI application
app = create_app()
