import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fra_assistant.config import settings
from fra_assistant.routes import chat_router, schemes_router, villages_router
from fra_assistant.services.catalog_service import catalog_service

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    catalog_service.load()
    logger.info("Scheme and village catalogs loaded")
    yield


app = FastAPI(
    title=settings.app_name,
    description="Guidance on government schemes for rural and forest-dwelling communities",
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router, prefix=settings.api_prefix)
app.include_router(schemes_router, prefix=settings.api_prefix)
app.include_router(villages_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} is running", "version": settings.app_version}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy" if catalog_service.loaded else "starting",
        "service": "fra-dss-assistant",
        "schemes": len(catalog_service.schemes),
        "villages": len(catalog_service.villages)
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("fra_assistant.main:app", host=settings.host, port=settings.port, reload=settings.debug)
