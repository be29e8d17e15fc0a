"""Main FastAPI application entry point."""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.routes import answers, questions
from core.models.response import ErrorResponse
from core.services.catalog.answer_catalog import get_default_catalog
from core.services.errors.error_handler import ErrorHandler
from core.utils.logger import logger

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG
)


@app.on_event("startup")
async def startup_event():
    """Load the answer catalog so a broken catalog fails the boot, not the first request."""
    logger.info("Portfolio Q&A API Starting...")
    catalog = get_default_catalog()
    logger.info(f"Answer catalog: {len(catalog)} answers")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors (400) with the validation details."""
    error = ErrorHandler.handle_validation_error(exc.errors(), path=request.url.path)
    return JSONResponse(
        status_code=400,
        content=error.model_dump(exclude_none=True)
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors with the same envelope as validation errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Anything else is a 500 without details."""
    error = ErrorHandler.handle_unexpected_error(exc, path=request.url.path)
    return JSONResponse(
        status_code=500,
        content=error.model_dump(exclude_none=True)
    )

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(questions.router, prefix="/api/questions", tags=["Questions"])
app.include_router(answers.router, prefix="/api/answers", tags=["Answers"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Portfolio Q&A API",
        "version": settings.API_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
