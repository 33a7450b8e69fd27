from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from inventory_api.handler import HandlerResponse, ItemHandler, split_path


def get_handler(request: Request) -> ItemHandler:
    return request.app.state.handler


def render(result: HandlerResponse) -> Response:
    if result.media == "json":
        return JSONResponse(status_code=result.status_code, content=result.payload)
    if result.media == "text":
        return PlainTextResponse(result.payload, status_code=result.status_code)
    return Response(status_code=result.status_code)


async def dispatch(request: Request) -> Response:
    handler = get_handler(request)
    body = await request.body()
    result = await run_in_threadpool(
        handler.handle, request.method, split_path(request.url.path), body
    )
    return render(result)


def include_items_route(app: FastAPI) -> None:
    # A plain route with no method list, so every verb reaches the handler.
    app.add_route("/{path:path}", dispatch, include_in_schema=False)
