"""The product description tool and the registry that hosts it."""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from description_tool import __version__
from description_tool.attributes import as_text
from description_tool.errors import MalformedRequestError, ValidationError
from description_tool.models import DescriptionRequest, DescriptionResult, ToolDefinition, ToolParameter
from description_tool.synthesis import DescriptionStrategy, NaturalStrategy

logger = logging.getLogger(__name__)

TOOL_NAME = "product-description-generator"

CONTENT_TYPES = ["general", "ecommerce", "technical", "marketing"]
TONES = ["professional", "casual", "friendly", "enthusiastic"]

REQUIRED_FIELDS = ("productName", "partNumber")


# Request body unwrapping: the first wrapper holding an object wins,
# otherwise the body itself is the parameter object.


def _wrapped(key: str) -> Callable[[Dict[str, Any]], Optional[Dict[str, Any]]]:
    def try_get(body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        value = body.get(key)
        return value if isinstance(value, dict) else None

    try_get.__name__ = f"from_{key}"
    return try_get


PARAMETER_EXTRACTORS = [_wrapped("parameters"), _wrapped("arguments"), _wrapped("input")]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def extract_parameters(body: Any) -> Dict[str, Any]:
    """Find the parameter object inside an execute request body."""
    if not isinstance(body, dict):
        raise MalformedRequestError(f"Request body must be a JSON object, got {type(body).__name__}")

    for extractor in PARAMETER_EXTRACTORS:
        params = extractor(body)
        if params is not None:
            return params
    return body


class ProductDescriptionGeneratorTool:
    """Generates product descriptions from a name, part number and attributes.

    The tool is immutable once built: its definition is computed in the
    constructor and served unchanged on every discovery call.
    """

    version = __version__

    def __init__(self, strategy: Optional[DescriptionStrategy] = None, name: str = TOOL_NAME):
        self.strategy = strategy or NaturalStrategy()
        self.name = name
        self.description = self.strategy.tool_description
        self._definition = ToolDefinition(
            name=self.name,
            description=self.description,
            version=self.version,
            parameters=[
                ToolParameter(
                    name="productName",
                    type="string",
                    description="The name of the product",
                    required=True,
                    example="Professional Drill Set",
                ),
                ToolParameter(
                    name="partNumber",
                    type="string",
                    description="The product part number or SKU",
                    required=True,
                    example="DRL-2024-PRO",
                ),
                ToolParameter(
                    name="attributes",
                    type="array",
                    description=(
                        "List of product attributes, features, or specifications "
                        '(e.g., ["Brand: DEWALT", "Voltage: 20V", "Capacity: 28 oz."]). '
                        "Optional; defaults to an empty list."
                    ),
                    required=False,
                    example=["Color: Blue", "Power: 20V", "Weight: 3.5 lbs"],
                    items={"type": "string"},
                ),
                ToolParameter(
                    name="type",
                    type="string",
                    description="The type or category of content to generate",
                    required=False,
                    example="ecommerce",
                    enum=CONTENT_TYPES,
                ),
                ToolParameter(
                    name="tone",
                    type="string",
                    description="The tone of the description",
                    required=False,
                    example="professional",
                    enum=TONES,
                ),
            ],
        )

    def discover(self) -> ToolDefinition:
        return self._definition

    def build_request(self, params: Mapping[str, Any]) -> DescriptionRequest:
        """Validate raw parameters and build a ``DescriptionRequest``."""
        missing = [field for field in REQUIRED_FIELDS if _is_blank(params.get(field))]
        if missing:
            verb = "is" if len(missing) == 1 else "are"
            raise ValidationError(f"{' and '.join(missing)} {verb} required")

        for field in REQUIRED_FIELDS + ("type", "tone"):
            value = params.get(field)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"{field} must be a string", error="Invalid parameters")

        attributes = params.get("attributes")
        if attributes is None:
            attributes = []
        elif not isinstance(attributes, list):
            raise ValidationError("attributes must be an array of strings", error="Invalid parameters")

        return DescriptionRequest(
            product_name=params["productName"],
            part_number=params["partNumber"],
            attributes=[as_text(attribute) for attribute in attributes],
            type=params.get("type") or "general",
            tone=params.get("tone") or "professional",
        )

    def execute(self, params: Mapping[str, Any]) -> DescriptionResult:
        request = self.build_request(params)
        logger.info(
            f"Generating {self.strategy.name} description - Product: {request.product_name}, "
            f"Part: {request.part_number}, Attributes: {len(request.attributes)}"
        )
        return self.strategy.synthesize(request)


class ToolRegistry:
    """Named tools hosted by one process. Built once at startup."""

    def __init__(self, tools: Optional[List[ProductDescriptionGeneratorTool]] = None):
        self._tools: Dict[str, ProductDescriptionGeneratorTool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: ProductDescriptionGeneratorTool) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> Optional[ProductDescriptionGeneratorTool]:
        return self._tools.get(name)

    def names(self) -> List[str]:
        return list(self._tools)

    def definitions(self) -> List[ToolDefinition]:
        return [tool.discover() for tool in self._tools.values()]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
