import json
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskpulse.config.settings import get_settings
from taskpulse.routers import (
    admin, auth, clients, dashboard, notes, notifications, projects, tasks, uploads, users,
)
from taskpulse.storage import init_storage
from taskpulse.utils.errors import TaskPulseError

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
)
logger = logging.getLogger("taskpulse")

MISSING_ERROR_TYPES = {"missing", "string_too_short"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Task Pulse API...")
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    init_storage()
    yield
    logger.info("Shutting down Task Pulse API...")


app = FastAPI(
    title="Task Pulse API",
    description="Task, project and client management backend",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration = time.perf_counter() - start
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({duration:.3f}s)")
    return response


@app.exception_handler(TaskPulseError)
async def domain_exception_handler(request: Request, exc: TaskPulseError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Sanitise errors to ensure JSON serialisability
    errors = []
    for err in exc.errors():
        clean_err = {
            "type": str(err.get("type", "unknown")),
            "loc": [str(part) for part in err.get("loc", [])],
            "msg": str(err.get("msg", "")),
        }
        if "input" in err:
            try:
                json.dumps(err["input"])
                clean_err["input"] = err["input"]
            except (TypeError, ValueError):
                clean_err["input"] = str(err["input"])
        errors.append(clean_err)

    types = {e["type"] for e in errors}
    if types & MISSING_ERROR_TYPES:
        message = "All fields are required"
    elif "extra_forbidden" in types:
        unknown = [e["loc"][-1] for e in errors if e["type"] == "extra_forbidden"]
        message = f"Unknown field(s): {', '.join(unknown)}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"message": message, "detail": errors})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(users.router, prefix="/api", tags=["Users"])
app.include_router(tasks.router, prefix="/api", tags=["Tasks"])
app.include_router(projects.router, prefix="/api", tags=["Projects"])
app.include_router(clients.router, prefix="/api", tags=["Clients"])
app.include_router(notifications.router, prefix="/api", tags=["Notifications"])
app.include_router(admin.router, prefix="/api", tags=["Admin"])
app.include_router(dashboard.router, prefix="/api", tags=["Dashboard"])
app.include_router(notes.router, prefix="/api", tags=["Notes"])
app.include_router(uploads.router, prefix="/api", tags=["Uploads"])

app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")


@app.get("/")
def root():
    return {"message": "Task Pulse API is running"}


@app.get("/health")
def health_check():
    return {"status": "healthy", "storage": settings.STORAGE_BACKEND}
