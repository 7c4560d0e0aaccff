# app/main.py
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.routes import employee_router
from app.database import connect_to_mongo, close_mongo_connection, init_db
from app.config import get_settings
from app.logging_config import setup_logging
from app.middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)

settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    try:
        mongo = await connect_to_mongo(settings)
    except Exception:
        logger.exception("Could not connect to MongoDB at startup")
        raise
    try:
        await init_db(mongo)
    except Exception:
        logger.exception("Could not initialise the employees collection")
        await close_mongo_connection(mongo)
        raise
    app.state.mongo = mongo
    yield
    # Shutdown
    await close_mongo_connection(mongo)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # malformed bodies are client errors, reported as 400 rather than 422
    return JSONResponse(
        status_code=400,
        content={
            "detail": {
                "message": "Invalid request body",
                "details": jsonable_encoder(exc.errors()),
            }
        },
    )

def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Employee API", lifespan=lifespan)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Employee API"}

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
