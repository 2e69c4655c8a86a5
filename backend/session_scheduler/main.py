import logging
import logging.config

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from session_scheduler import config
from session_scheduler.routes import schedule

logging.config.dictConfig(config.LOGGING_CONFIG)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(schedule.router, prefix="/api", tags=["schedule"])


@app.on_event("startup")
def on_startup():
    route_paths = sorted(getattr(r, "path", "") for r in app.routes if getattr(r, "path", None))
    logger.info("STARTUP: app=%s version=%s routes=%s", config.APP_NAME, config.APP_VERSION, len(route_paths))
    for path in route_paths:
        logger.debug("ROUTE: %s", path)


@app.get("/api/health")
def health_check():
    """Diagnostic endpoint to verify which build is running"""
    return {"app_name": config.APP_NAME, "version": config.APP_VERSION, "status": "healthy"}


@app.get("/")
def root():
    return {"message": f"{config.APP_NAME} (see /docs)"}
