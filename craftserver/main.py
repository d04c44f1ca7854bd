from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import HardwareProbeError, SerializationError
from .hardware import HardwareProbe, probe_hardware
from .schemas import Craft, example_craft, to_json

INDEX = b'<a href="test.html">test.html</a>'
NOT_FOUND = b"Not Found"
JSON_MEDIA_TYPE = "application/json"

router = APIRouter()


# === Dependencies ===


def get_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


def get_craft() -> Craft:
    return example_craft()


def get_hardware_probe() -> HardwareProbe:
    return probe_hardware


# === Routes ===


@router.get("/")
@router.get("/index.html")
def index() -> Response:
    return Response(content=INDEX)


@router.get("/craft")
def craft(
    record: Craft = Depends(get_craft),
    logger: logging.Logger = Depends(get_logger),
) -> Response:
    try:
        body = to_json(record)
    except SerializationError as exc:
        logger.warning("serializing json: %s", exc)
        return Response(content=NOT_FOUND, status_code=500)
    logger.info("success %s", body)
    return Response(content=body, media_type=JSON_MEDIA_TYPE)


@router.get("/stats")
def stats(
    probe: HardwareProbe = Depends(get_hardware_probe),
    logger: logging.Logger = Depends(get_logger),
) -> Response:
    try:
        body = to_json(probe())
    except SerializationError as exc:
        logger.warning("serializing json: %s", exc)
        return Response(status_code=500)
    except HardwareProbeError as exc:
        logger.warning("probing hardware: %s", exc)
        return Response(status_code=500)
    except Exception:
        logger.exception("building stats")
        return Response(status_code=500)
    return Response(content=body, media_type=JSON_MEDIA_TYPE)


# === Fallback ===


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    return Response(status_code=404)


def create_app(logger: Optional[logging.Logger] = None) -> FastAPI:
    app = FastAPI(
        title="Craft Server",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.logger = logger or logging.getLogger("craftserver")
    # Unknown paths and wrong methods on known paths are both plain 404s.
    app.add_exception_handler(404, not_found_handler)
    app.add_exception_handler(405, not_found_handler)
    app.include_router(router)
    return app


app = create_app()
