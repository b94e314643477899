"""
Main application file for the Article Scraper API.

This file initializes the FastAPI application, sets up logging,
registers global exception handlers, and includes API routers.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from article_scraper import __version__
from article_scraper.api.routes import article_routes
from article_scraper.core.config import config_manager
from article_scraper.core.exceptions import ArticleScraperError
from article_scraper.core.logger import setup_logging, get_logger

setup_logging(config_manager)
logger = get_logger(__name__)


app = FastAPI(
    title="Article Scraper API",
    description="Renders article pages in a headless browser and returns their readable content.",
    version=__version__,
)


@app.exception_handler(ArticleScraperError)
async def article_scraper_exception_handler(request: Request, exc: ArticleScraperError):
    """
    Handles application exceptions that escape the route handlers.

    Returns:
        JSONResponse: A JSON error response with HTTP 500.
    """
    logger.error(
        f"ArticleScraperError caught: {exc.__class__.__name__} - {exc.message} "
        f"for request: {request.method} {request.url}",
        exc_info=True
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"An application error occurred: {exc.message}"},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handles request validation failures (e.g., a missing or relative `articleUrl`).

    Returns:
        JSONResponse: HTTP 422 with the validation errors.
    """
    logger.warning(f"RequestValidationError caught for: {request.method} {request.url}. Errors: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": "Request validation failed", "errors": _jsonable_errors(exc)},
    )


def _jsonable_errors(exc: RequestValidationError):
    # Validator errors carry the raised ValueError in 'ctx', which is not JSON serializable.
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(error)
    return errors


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """
    Catch-all so that unexpected failures still produce a JSON response.
    """
    logger.critical(
        f"Generic unhandled exception caught: {exc.__class__.__name__} - {str(exc)} "
        f"for request: {request.method} {request.url}",
        exc_info=True
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected server error occurred. Please contact support if the issue persists."},
    )


app.include_router(
    article_routes.router,
    prefix="/api/v1/articles",
    tags=["Articles"]
)


@app.get("/", tags=["General"], summary="API Root Endpoint")
async def read_root():
    """
    Provides basic information about the API.
    """
    return {
        "message": "Welcome to the Article Scraper API",
        "version": app.version,
        "environment": config_manager.current_environment,
        "documentation_url": app.docs_url,
    }


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Uvicorn server directly for local development (not for production)...")
    uvicorn.run(app, host="0.0.0.0", port=8000)
