from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathfinder.config import settings
from pathfinder.logging_config import configure_logging
from pathfinder.services.template_service import initialize_templates
from pathfinder.api.routes import health, projection, planning, opportunity, advisor


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: logging and path templates
    configure_logging()
    initialize_templates()
    yield


app = FastAPI(title="PathFinder Planning Engine", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(projection.router, prefix="/api")
app.include_router(planning.router, prefix="/api")
app.include_router(opportunity.router, prefix="/api")
app.include_router(advisor.router, prefix="/api")
