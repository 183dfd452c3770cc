import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import config
from app.database import MovieStore
from app.routers import movies

# --- LOGGING CONFIGURATION ---
logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Rejected payloads come back as 400 with the list of field issues."""
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} issue(s)")
    return JSONResponse(status_code=400, content={"error": jsonable_encoder(exc.errors())})


async def body_error_handler(request: Request, exc: StarletteHTTPException):
    """Bodies FastAPI cannot even decode get the same 400 shape as schema failures."""
    if exc.status_code != 400:
        return await http_exception_handler(request, exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.detail}")
    issue = {"type": "body_parsing", "loc": ["body"], "msg": exc.detail}
    return JSONResponse(status_code=400, content={"error": [issue]})


def create_app(store: Optional[MovieStore] = None, origins: Optional[List[str]] = None) -> FastAPI:
    # --- APP CONFIGURATION ---
    app = FastAPI(title="Movies API", version="1.0.0")
    app.state.store = store if store is not None else MovieStore.from_file()

    # Origins outside the list get no allow header; requests without an Origin pass untouched
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins if origins is not None else config.ACCEPTED_ORIGINS,
        allow_methods=config.ALLOWED_METHODS,
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, body_error_handler)

    # --- ROUTERS ---
    app.include_router(movies.router)

    @app.get("/")
    def health_check():
        return {"status": "online", "movies": len(app.state.store.movies)}

    return app


app = create_app()
