"""
Gatekeeper Main Application

FastAPI application entry point for the access decision service.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import logging

from . import __version__
from .api.routes import router, get_route_table
from .config import get_config
from .schemas.validation import RouteTableError


config = get_config()

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="Gatekeeper Access Decisions",
    description="""
## Gatekeeper - Permission-Based Access Control

Evaluates a principal's resolved permission list (`feature:action`
strings) for UI collaborators: route guards, conditional renderers and
navigation filters.

### What Gatekeeper Does NOT Do
- Store permissions or roles
- Resolve role hierarchies
- Authenticate users

### Decision Rules
1. **Exact matching** - `users:write` does not imply `users:read`
2. **Any of nothing denies, all of nothing allows**
3. **Unconfigured routes are open**
4. **Anonymous principals go to login first**
    """,
    version=__version__,
    debug=config.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include router
app.include_router(router)


@app.exception_handler(RouteTableError)
async def route_table_error_handler(request: Request, exc: RouteTableError):
    return JSONResponse(status_code=400, content={"detail": str(exc), "code": exc.code})


@app.on_event("startup")
async def startup_event():
    """Load the route table so configuration errors show up at boot."""
    table = get_route_table()
    logging.info(f"Gatekeeper starting with {len(table)} route rule(s)...")


@app.on_event("shutdown")
async def shutdown_event():
    logging.info("Gatekeeper shutting down...")


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {
        "name": "Gatekeeper Access Decisions",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
