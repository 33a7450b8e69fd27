from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Type, TypeVar

import pydantic

from inventory_api.errors import InventoryError, MalformedRequest, MethodNotAllowed, NotFound
from inventory_api.schemas import ItemCreate, ItemUpdate
from inventory_api.storage import InventoryStore

logger = logging.getLogger(__name__)

_ITEM_ID_RE = re.compile(r"[+-]?[0-9]+")

# Ids are signed 64-bit integers.
_MIN_ITEM_ID = -(2**63)
_MAX_ITEM_ID = 2**63 - 1

Body = TypeVar("Body", bound=pydantic.BaseModel)


@dataclass
class HandlerResponse:
    status_code: int
    payload: Any = None
    media: str = "json"

    @classmethod
    def error(cls, err: InventoryError) -> "HandlerResponse":
        return cls(status_code=err.status_code, payload=err.message, media="text")


def split_path(path: str) -> list[str]:
    """`/items/7/` -> ["items", "7"]; inner empty segments are kept."""

    return path.strip("/").split("/")


def parse_item_id(raw: str) -> int:
    if not _ITEM_ID_RE.fullmatch(raw):
        raise MalformedRequest("Invalid Item ID")
    item_id = int(raw)
    if not _MIN_ITEM_ID <= item_id <= _MAX_ITEM_ID:
        raise MalformedRequest("Invalid Item ID")
    return item_id


def decode_body(raw: bytes, model: Type[Body]) -> Body:
    try:
        return model.model_validate_json(raw or b"")
    except pydantic.ValidationError as err:
        raise MalformedRequest("Invalid JSON") from err


class ItemHandler:
    """Routes (method, path segments, body) to the store.

    Works on plain values so it can be driven from any HTTP layer: every outcome,
    including failures, comes back as a `HandlerResponse`.
    """

    def __init__(self, store: InventoryStore):
        self.store = store

    def handle(self, method: str, segments: list[str], body: Optional[bytes] = None) -> HandlerResponse:
        try:
            return self._dispatch(method, segments, body)
        except InventoryError as err:
            return HandlerResponse.error(err)

    def _dispatch(self, method: str, segments: list[str], body: Optional[bytes]) -> HandlerResponse:
        if segments == ["items"]:
            if method == "GET":
                return self.list_items()
            if method == "POST":
                return self.create_item(body)
            logger.debug("%s not allowed on /items", method)
            raise MethodNotAllowed()

        if len(segments) == 2 and segments[0] == "items":
            item_id = parse_item_id(segments[1])
            if method == "GET":
                return self.get_item(item_id)
            if method == "PUT":
                return self.update_item(item_id, body)
            if method == "DELETE":
                return self.delete_item(item_id)
            logger.debug("%s not allowed on /items/%d", method, item_id)
            raise MethodNotAllowed()

        logger.debug("No route for /%s", "/".join(segments))
        raise NotFound("Not found")

    def list_items(self) -> HandlerResponse:
        items = self.store.list()
        return HandlerResponse(200, [item.model_dump() for item in items])

    def create_item(self, body: Optional[bytes]) -> HandlerResponse:
        item = self.store.create(decode_body(body, ItemCreate))
        return HandlerResponse(201, item.model_dump())

    def get_item(self, item_id: int) -> HandlerResponse:
        return HandlerResponse(200, self.store.get(item_id).model_dump())

    def update_item(self, item_id: int, body: Optional[bytes]) -> HandlerResponse:
        patch = decode_body(body, ItemUpdate)
        return HandlerResponse(200, self.store.update(item_id, patch).model_dump())

    def delete_item(self, item_id: int) -> HandlerResponse:
        self.store.delete(item_id)
        return HandlerResponse(204, media="empty")
