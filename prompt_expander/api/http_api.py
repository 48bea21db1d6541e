"""
HTTP API adapter for the prompt expander.

Architectural role:
- Expose the expansion handler on a single route, `/api/generate-prompt`.
- Translate FastAPI requests into `PromptExpansionHandler.handle` calls and the
  resulting `HandlerResponse` back into a FastAPI `Response`.

Endpoint responsibilities:
- Accept every common method on the route so that the handler, not the router,
  decides between pre-flight, write and 405 outcomes.

Concurrency:
- The request body is awaited; the blocking upstream call runs in the thread pool
  so the event loop stays free for unrelated requests.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Configures root logging from `LOG_LEVEL`.
"""

from dotenv import load_dotenv

load_dotenv()

from fastapi import Depends, FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from prompt_expander.api.handler import HandlerResponse, PromptExpansionHandler
from prompt_expander.api.logging_setup import configure_logging

configure_logging()

ROUTE = "/api/generate-prompt"
ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

app = FastAPI(title="Prompt Expander", version="1.0.0")

_handler = PromptExpansionHandler()


def get_handler() -> PromptExpansionHandler:
    """Return the process-wide handler. Overridden in tests."""
    return _handler


def _to_response(result: HandlerResponse) -> Response:
    return Response(
        content=result.body_text(),
        status_code=result.status_code,
        headers=result.headers,
    )


@app.api_route(ROUTE, methods=ROUTE_METHODS)
async def generate_prompt(
    request: Request,
    handler: PromptExpansionHandler = Depends(get_handler),
):
    """Expand `{"idea", "style", "lighting"}` into `{"prompt": ...}`."""
    body = await request.body()
    result = await run_in_threadpool(handler.handle, request.method, body)
    return _to_response(result)


@app.exception_handler(StarletteHTTPException)
async def route_method_not_allowed(request: Request, exc: StarletteHTTPException):
    """Answer methods the router rejects on `ROUTE` with the handler's own 405.

    Methods outside `ROUTE_METHODS` (TRACE, WebDAV verbs, custom verbs) never reach
    `generate_prompt`; every other HTTP error keeps FastAPI's default rendering.
    """
    if exc.status_code == 405 and request.url.path == ROUTE:
        handler = app.dependency_overrides.get(get_handler, get_handler)()
        return _to_response(handler.handle(request.method, None))
    return await http_exception_handler(request, exc)
