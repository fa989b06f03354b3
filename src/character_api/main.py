from __future__ import annotations

import logging

import uvicorn

from character_api.api.app import create_app
from character_api.config import HOST, PORT, Settings
from character_api.logging_config import setup_logging
from character_api.store import DataStore

_LOG = logging.getLogger(__name__)


def main() -> None:
    settings = Settings.from_env()
    setup_logging(settings)

    app = create_app(DataStore.from_defaults(settings))

    _LOG.info("Server starting on port %d...", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
