"""Discovery / execute contract between the HTTP layer and the tools.

The adapter never raises for a bad request: every failure becomes a
failure envelope with ``success: false`` and a 400 status.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from description_tool.errors import ToolError
from description_tool.models import (
    DiscoveryFunction,
    DiscoveryResponse,
    ErrorResponse,
    ExecuteMetadata,
    ExecuteResponse,
    HealthResponse,
)
from description_tool.tool import ProductDescriptionGeneratorTool, ToolRegistry, extract_parameters

logger = logging.getLogger(__name__)

ENDPOINTS = {
    "discovery": "/discovery",
    "health": "/",
    "execute": "POST /",
}


def dump(model) -> Dict[str, Any]:
    """Serialize a response model with wire field names."""
    return model.model_dump(by_alias=True, exclude_none=True)


class ToolProtocolAdapter:
    """Serves discovery and execute for the tools in a registry."""

    def __init__(self, registry: ToolRegistry, default_tool: Optional[str] = None, debug: bool = False):
        if len(registry) == 0:
            raise ValueError("Registry has no tools")
        self.registry = registry
        self.default_tool = default_tool or registry.names()[0]
        if self.default_tool not in registry:
            raise ValueError(f"Default tool '{self.default_tool}' is not registered")
        self.debug = debug

        functions = []
        for definition in registry.definitions():
            endpoint = "/" if definition.name == self.default_tool else f"/tools/{definition.name}"
            functions.append(DiscoveryFunction(**definition.model_dump(), endpoint=endpoint))
        self._discovery = dump(DiscoveryResponse(functions=functions))

    @property
    def tool(self) -> ProductDescriptionGeneratorTool:
        return self.registry.get(self.default_tool)

    def discover(self) -> Dict[str, Any]:
        return self._discovery

    def health(self) -> Dict[str, Any]:
        tool = self.tool
        return dump(HealthResponse(
            status="healthy",
            tool=tool.name,
            version=tool.version,
            description=tool.description,
            endpoints=ENDPOINTS,
        ))

    def error(self, error: str, details: Optional[str] = None, tool: Optional[ProductDescriptionGeneratorTool] = None) -> Dict[str, Any]:
        tool = tool or self.tool
        return dump(ErrorResponse(error=error, details=details, tool=tool.name, version=tool.version))

    def execute(self, body: Any, tool_name: Optional[str] = None) -> Tuple[int, Dict[str, Any]]:
        """Run a tool against a decoded request body.

        Returns the HTTP status code and the response envelope.
        """
        tool = self.registry.get(tool_name or self.default_tool)
        if tool is None:
            return 404, self.error("Tool not found", f"No tool named '{tool_name}'")

        try:
            params = extract_parameters(body)
            result = tool.execute(params)
        except ToolError as e:
            logger.warning(f"{tool.name} rejected request: {e.error} - {e.details}")
            return 400, self.error(e.error, e.details, tool)
        except Exception as e:
            logger.exception(f"Unexpected error in {tool.name}")
            return 400, self.error("Failed to generate description", str(e) if self.debug else None, tool)

        response = ExecuteResponse(
            result=result,
            content=result.content,
            metadata=ExecuteMetadata(
                tool=tool.name,
                version=tool.version,
                product_name=result.product_name,
                part_number=result.part_number,
                attribute_count=result.attribute_count,
            ),
        )
        return 200, dump(response)
