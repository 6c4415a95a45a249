from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import SETTINGS, configure_logging
from .errors import register_error_handlers
from .routers import employees, timesheets, menus, menu_items

configure_logging()

# Initialize FastAPI application
app = FastAPI(title="Bistro API", version="1.0.0")

# Error responses are always {"error": "..."}
register_error_handlers(app)

# Cross-origin requests from the front-end
app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS["cors"]["allow_origins"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(employees.router, prefix="/api")
app.include_router(timesheets.router, prefix="/api")
app.include_router(menus.router, prefix="/api")
app.include_router(menu_items.router, prefix="/api")

# Health check endpoint
@app.get("/health")
def health():
    return {"status": "ok"}
