import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from inventory_api import config
from inventory_api.handler import ItemHandler
from inventory_api.routes.items import include_items_route
from inventory_api.storage import InventoryStore

APP_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def create_app(store: Optional[InventoryStore] = None) -> FastAPI:
    # Only the inventory routes are served; every other path is a plain 404.
    app = FastAPI(
        title="Inventory API",
        version=APP_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store if store is not None else InventoryStore()
    app.state.handler = ItemHandler(app.state.store)
    include_items_route(app)
    return app


app = create_app()


def run() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Server running at port %d", config.PORT)
    uvicorn.run(create_app(), host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
