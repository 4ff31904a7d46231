"""Pydantic models for tool requests, results and protocol envelopes.

Field names are snake_case in Python and camelCase on the wire
(``productName``, ``partNumber``, ``attributeCount``); dump with
``by_alias=True`` when serializing.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# Request / result


class DescriptionRequest(BaseModel):
    """Validated input to a synthesis strategy."""

    product_name: str = Field(..., alias="productName", min_length=1)
    part_number: str = Field(..., alias="partNumber", min_length=1)
    attributes: List[str] = Field(default_factory=list)
    type: str = "general"
    tone: str = "professional"

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DescriptionResult(BaseModel):
    """Generated description plus echoed metadata."""

    content: str
    product_name: str = Field(..., alias="productName")
    part_number: str = Field(..., alias="partNumber")
    attribute_count: int = Field(..., alias="attributeCount")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


# Discovery


class ToolParameter(BaseModel):
    """One entry of a tool's parameter schema."""

    name: str
    type: Literal["string", "number", "boolean", "array", "object"]
    description: str
    required: bool
    example: Optional[Any] = None
    items: Optional[Dict[str, str]] = None
    enum: Optional[List[str]] = None

    model_config = ConfigDict(frozen=True)


class ToolDefinition(BaseModel):
    """Static capability descriptor served on discovery."""

    name: str
    description: str
    version: str
    parameters: List[ToolParameter]

    model_config = ConfigDict(frozen=True)


class DiscoveryFunction(ToolDefinition):
    """A tool definition plus where and how the platform should call it."""

    endpoint: str
    http_method: Literal["POST"] = "POST"
    auth_requirements: List[Dict[str, Any]] = Field(default_factory=list)


class DiscoveryResponse(BaseModel):
    functions: List[DiscoveryFunction]


# Execute envelopes


class ExecuteMetadata(BaseModel):
    tool: str
    version: str
    product_name: str = Field(..., alias="productName")
    part_number: str = Field(..., alias="partNumber")
    attribute_count: int = Field(..., alias="attributeCount")

    model_config = ConfigDict(populate_by_name=True)


class ExecuteResponse(BaseModel):
    """Envelope for a successful execute call."""

    success: Literal[True] = True
    result: DescriptionResult
    content: str
    metadata: ExecuteMetadata


class ErrorResponse(BaseModel):
    """Envelope for a failed execute call."""

    success: Literal[False] = False
    error: str
    details: Optional[str] = None
    tool: str
    version: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy"]
    tool: str
    version: str
    description: str
    sdk_pattern: str = "optimizely-opal-tools-sdk"
    endpoints: Dict[str, str]
