import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from app.constants import CORS_ORIGINS, EXPOSE_ERROR_DETAILS, INTERNAL_SERVER_ERROR
from app.core.errors import InstructionStoreError
from app.core.logging import configure_logging
from app.core.rate_limit import limiter
from app.database import create_tables
from app.routers import auth, instructions

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create database tables
    create_tables()
    logger.info("Database tables are ready")
    yield


app = FastAPI(title="Recipe Instructions Backend", version="1.0.0", lifespan=lifespan)
app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InstructionStoreError)
async def instruction_store_error_handler(request: Request, exc: InstructionStoreError):
    body = {"success": False, "message": exc.message}
    if exc.error is not None and EXPOSE_ERROR_DETAILS:
        body["error"] = exc.error
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Invalid request",
            "errors": jsonable_encoder(
                [
                    {key: value for key, value in error.items() if key != "ctx"}
                    for error in exc.errors()
                ]
            ),
        },
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": INTERNAL_SERVER_ERROR},
    )


app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Include routers
app.include_router(
    instructions.router, prefix="/api/instructions", tags=["instructions"]
)
app.include_router(auth.router, prefix="/auth", tags=["auth"])


@app.get("/")
async def root():
    return {"message": "Recipe Instructions API is running!"}
