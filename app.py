import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import HOST, PORT, GRAPHQL_PATH, LOG_LEVEL
from graph import create_graphql_router
from models import create_tables
from routers import auth_router, films_router, people_router, roles_router, register_exception_handlers
from security import JwtAuthMiddleware
from logger import get_logger

# Get logger
logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup"""
    logger.info("Starting filmdb...")
    await create_tables()
    logger.info("filmdb is running...")
    yield
    logger.info("filmdb stopped")


def create_app(lifespan=lifespan) -> FastAPI:
    """Build the FastAPI application with REST routers and the GraphQL endpoint"""
    app = FastAPI(title="filmdb", version="1.0.0", lifespan=lifespan)
    app.add_middleware(JwtAuthMiddleware)

    # Register routers
    app.include_router(auth_router)
    app.include_router(films_router)
    app.include_router(people_router)
    app.include_router(roles_router)
    app.include_router(create_graphql_router(), prefix=GRAPHQL_PATH)

    register_exception_handlers(app)
    return app


app = create_app()


def main():
    """Main function"""
    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
