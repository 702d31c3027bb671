import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.config.settings import settings
from app.config.database import engine, Base
from app.core.middleware import setup_middleware
from app.api.router import api_router

# Registrar modelos en Base.metadata
from app.shared.database import models  # noqa: F401

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"{settings.app_name} starting...")
    logger.info(f"Version: {settings.version}")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")
    
    if settings.create_tables_on_startup:
        Base.metadata.create_all(bind=engine)
    
    yield
    
    # Shutdown
    logger.info(f"{settings.app_name} shutting down...")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API de la tienda: empleados, productos, clientes y ventas",
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": f"{settings.app_name} - Sistema de Ventas",
        "version": settings.version,
        "status": "running",
        "docs": "/docs",
        "api": "/api"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
