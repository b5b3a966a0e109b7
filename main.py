"""
wemake - FastAPI application entry point
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.api import community, products, jobs, teams, ideas, users

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# Application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="wemake community and marketplace API",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"]
)

register_exception_handlers(app)

# Routers
app.include_router(community.router)
app.include_router(products.router)
app.include_router(jobs.router)
app.include_router(teams.router)
app.include_router(ideas.router)
app.include_router(users.router)


@app.get("/")
async def root():
    """Root"""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "message": "wemake API is running"
    }


@app.get("/health")
async def health_check():
    """Health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
