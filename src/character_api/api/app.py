from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from character_api import __version__
from character_api.generator import CharacterGenerator, DataUnavailable
from character_api.selector import RandomSelector
from character_api.store import DataStore

from .middleware.cors import cors_middleware
from .routers.characters import router as characters_router

_LOG = logging.getLogger(__name__)


async def data_unavailable_handler(request: Request, exc: DataUnavailable):
    _LOG.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return PlainTextResponse(f"{exc}\n", status_code=500)


def create_app(
    store: Optional[DataStore] = None,
    selector: Optional[RandomSelector] = None,
) -> FastAPI:
    """Build the application around one store and one selector.

    Without a store the bundled datasets are loaded here, once.
    """
    # Docs routes are disabled so that the catch-all echo owns every other path
    app = FastAPI(
        title="Character API",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    if store is None:
        store = DataStore.from_defaults()
    app.state.generator = CharacterGenerator(store, selector or RandomSelector())

    app.middleware("http")(cors_middleware)
    app.add_exception_handler(DataUnavailable, data_unavailable_handler)

    app.include_router(characters_router)

    return app
