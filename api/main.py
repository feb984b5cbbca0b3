import logging

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
from api.models import METHOD_NOT_ALLOWED, VersionResponse
from api.routers import analyze

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Gluten Check API",
    description="Gluten verdicts for free-text ingredient lists",
    version=config.APP_VERSION,
)

# Wildcard origins cannot be combined with credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials="*" not in config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze.router)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """405 carries a message body; other HTTP errors keep the default shape."""
    if exc.status_code == 405:
        return JSONResponse(
            status_code=405,
            content={"message": METHOD_NOT_ALLOWED},
            headers=exc.headers,
        )
    return await http_exception_handler(request, exc)


@app.get("/")
async def root():
    return {"message": "Gluten Check API is running", "docs": "/docs"}


@app.get("/api/health")
async def health():
    return {"status": "healthy"}


@app.get("/api/version", response_model=VersionResponse)
async def version(response: Response):
    """Deployed version, never cached."""
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
    return {"version": config.APP_VERSION}


if __name__ == "__main__":
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000)
