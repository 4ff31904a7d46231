"""Tests for request and envelope models."""

import pydantic
import pytest

from description_tool.models import DescriptionRequest, DescriptionResult, ToolParameter


class TestModelConfig:
    """Tests for aliasing and immutability."""

    def test_request_accepts_wire_and_python_names(self):
        wire = DescriptionRequest(productName="X", partNumber="Y")
        python = DescriptionRequest(product_name="X", part_number="Y")

        assert wire == python
        assert wire.attributes == []
        assert wire.type == "general"
        assert wire.tone == "professional"

    def test_result_dumps_wire_names(self):
        result = DescriptionResult(content="c", product_name="X", part_number="Y", attribute_count=0)

        assert result.model_dump(by_alias=True) == {
            "content": "c",
            "productName": "X",
            "partNumber": "Y",
            "attributeCount": 0,
        }

    @pytest.mark.parametrize("model,field,value", [
        (DescriptionRequest(productName="X", partNumber="Y"), "product_name", "Z"),
        (ToolParameter(name="tone", type="string", description="d", required=False), "required", True),
    ])
    def test_frozen(self, model, field, value):
        with pytest.raises(pydantic.ValidationError):
            setattr(model, field, value)
