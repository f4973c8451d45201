from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from mealrotation.api.routes import alerts, catalog, plans
from mealrotation.domain.GenerationConfig import ConfigurationError
from mealrotation.events.web_observers import start as start_event_observers

# Logging
logger = logging.getLogger("mealrotation_app")

# Initialize FastAPI app
app = FastAPI(title="Meal Rotation Planner API")

# Include routers
app.include_router(catalog.router)
app.include_router(plans.router)
app.include_router(alerts.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for planning alerts when the app starts."""
    start_event_observers()
    logger.info("Web observers for planning events started")


@app.exception_handler(ConfigurationError)
def _configuration_error(request: Request, exc: ConfigurationError):
    logger.error("Configuration error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": f"Configuration error: {exc}"})


@app.get("/health")
def health():
    return {"status": "ok"}
