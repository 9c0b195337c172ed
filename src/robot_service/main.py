"""
Robot Service GraphQL

FastAPI + Strawberry GraphQL service for robot management.
Part of Apollo Federation for Robot Monitoring System.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from robot_service import __version__
from robot_service.core.config import get_settings
from robot_service.core.logging import setup_logger
from robot_service.data.repository import get_repository
from robot_service.schema import create_graphql_router


# Settings and logger
settings = get_settings()
logger = setup_logger(settings.service_name, "INFO" if not settings.debug else "DEBUG")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 {settings.service_name} starting up...")
    logger.info(f"📊 Environment: {settings.environment}")
    logger.info(f"🤖 Robots loaded: {get_repository().get_count()}")
    logger.info(f"🌐 GraphQL endpoint: http://{settings.host}:{settings.port}/graphql")
    yield
    logger.info(f"🛑 {settings.service_name} shutting down...")


# FastAPI app
app = FastAPI(
    title="Robot Service GraphQL",
    description="Robot management service - GraphQL Subgraph with Apollo Federation",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# GraphQL router
graphql_router = create_graphql_router()
app.include_router(graphql_router, prefix="/graphql")


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "total_robots": get_repository().get_count()
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": __version__,
        "graphql": "/graphql",
        "graphiql": "/graphql (browser)"
    }


def run():
    """Run the service with uvicorn"""
    import uvicorn

    uvicorn.run(
        "robot_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
