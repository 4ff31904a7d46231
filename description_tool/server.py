"""HTTP surface of the product description generator.

Endpoints follow the Opal custom-tool convention:

- ``GET /discovery``: tool definitions
- ``GET /``: health and version
- ``POST /``: execute the default tool
- ``POST /tools/{name}``: execute a named tool

Every response carries permissive CORS headers and any ``OPTIONS`` request
is answered as a preflight.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from description_tool import __version__
from description_tool.config import Settings, get_settings
from description_tool.errors import MalformedRequestError
from description_tool.protocol import ENDPOINTS, ToolProtocolAdapter
from description_tool.synthesis import get_strategy
from description_tool.tool import ProductDescriptionGeneratorTool, ToolRegistry

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Opal-Request-Id",
}


def build_adapter(settings: Settings) -> ToolProtocolAdapter:
    """Create the tool registry and adapter for the configured strategy."""
    tool = ProductDescriptionGeneratorTool(strategy=get_strategy(settings.strategy))
    registry = ToolRegistry([tool])
    return ToolProtocolAdapter(registry, default_tool=tool.name, debug=settings.debug)


async def read_body(request: Request):
    try:
        return await request.json()
    except (ValueError, RecursionError) as e:
        raise MalformedRequestError(f"Request body is not valid JSON: {e}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    adapter = build_adapter(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {adapter.tool.name} v{__version__} with {settings.strategy} strategy")
        yield
        logger.info(f"Shutting down {adapter.tool.name}")

    app = FastAPI(
        title="Product Description Generator",
        description="Opal custom tool that generates product descriptions from attributes",
        version=__version__,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            tool = adapter.tool
            return JSONResponse(status_code=404, content={
                "error": "Not Found",
                "message": "Available endpoints: GET /discovery, GET / (health), POST / (execute)",
                "tool": tool.name,
                "version": tool.version,
                "endpoints": ENDPOINTS,
            })
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.get("/discovery")
    async def discovery():
        return adapter.discover()

    @app.get("/")
    async def root():
        return adapter.health()

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": adapter.tool.name}

    @app.post("/")
    async def execute(request: Request):
        return await _execute(request, None)

    @app.post("/tools/{tool_name}")
    async def execute_named(tool_name: str, request: Request):
        return await _execute(request, tool_name)

    async def _execute(request: Request, tool_name: Optional[str]):
        try:
            body = await read_body(request)
            status_code, payload = adapter.execute(body, tool_name)
        except MalformedRequestError as e:
            logger.warning(f"Malformed request: {e.details}")
            return JSONResponse(status_code=400, content=adapter.error(e.error, e.details))
        except Exception as e:
            logger.exception("Unexpected error handling execute request")
            details = str(e) if settings.debug else None
            return JSONResponse(status_code=400, content=adapter.error("Failed to generate description", details))
        return JSONResponse(status_code=status_code, content=payload)

    return app


app = create_app()


def main():
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
