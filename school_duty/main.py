import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from school_duty.auth import protect_routes, self_or_admin
from school_duty.config import API_PREFIX, CORS_ORIGINS, DEFAULT_JWT_SECRET, JWT_SECRET, LOG_LEVEL
from school_duty.core.exceptions import DomainError
from school_duty.database import database
from school_duty.routers import attendance, duties, users

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger(__name__)


def check_settings():
    if JWT_SECRET == DEFAULT_JWT_SECRET:
        logger.warning("⚠️ JWT_SECRET is not set, tokens are verified with the built-in default key")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Starting up...")
    check_settings()
    await database.connect()
    await database.ensure_indexes()

    yield

    logger.info("🛑 Shutting down...")
    database.disconnect()


app = FastAPI(title="School Duty & Attendance API", lifespan=lifespan)


def envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


# registered before CORS so that 500 responses still pass through CORSMiddleware
@app.middleware("http")
async def internal_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        # raw message goes back to the caller
        logger.exception("❌ Unhandled error on %s %s", request.method, request.url.path)
        return envelope(500, str(exc))


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return envelope(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'] if part != 'body') or 'body'}: {err['msg']}"
        for err in exc.errors()
    )
    return envelope(400, f"Invalid request: {problems}")


guarded = [Depends(protect_routes), Depends(self_or_admin)]

app.include_router(attendance.router, prefix=f"{API_PREFIX}/attendance", tags=["Attendance"], dependencies=guarded)
app.include_router(duties.router, prefix=f"{API_PREFIX}/duties", tags=["Duties"], dependencies=guarded)
app.include_router(users.router, prefix=f"{API_PREFIX}/update", tags=["Users"], dependencies=guarded)


@app.get("/")
def root():
    return {"message": "API is running!"}
