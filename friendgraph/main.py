# friendgraph/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from friendgraph.core.config import settings
from friendgraph.core.logging_config import configure_logging, get_logger
from friendgraph.common.exceptions import ResultValidationError
from friendgraph.db.session import engine
from friendgraph.db.base_class import Base
# Imported so the tables are registered on Base.metadata
from friendgraph.models.user import User  # noqa: F401
from friendgraph.models.friendship import Friendship  # noqa: F401

from friendgraph.routers import friends

configure_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create missing tables on startup
    Base.metadata.create_all(bind=engine)
    logger.info("%s started", settings.PROJECT_NAME)
    yield

app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ResultValidationError)
async def result_validation_error_handler(request: Request, exc: ResultValidationError):
    logger.error("internal result validation failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

app.include_router(friends.router, prefix="/api/v1/my-friends", tags=["friends"])

@app.get("/")
def read_root():
    return {"message": f"{settings.PROJECT_NAME} is running!"}
