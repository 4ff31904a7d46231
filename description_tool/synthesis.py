"""Description synthesis strategies.

Each strategy turns a ``DescriptionRequest`` into a ``DescriptionResult``.
No model is called; every strategy is plain templating over the parsed
attributes, so the same request always yields the same text.

- ``natural``: one compact paragraph, context-aware, at most 500 characters
- ``markdown``: a structured markdown report with no length cap
- ``summary``: product name, part number and the raw attributes in a sentence
"""

import logging
from typing import Dict, List, Type

from description_tool.attributes import Attribute, AttributeSet, parse
from description_tool.models import DescriptionRequest, DescriptionResult

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 500
ELLIPSIS = "..."

POWER_KEYS = ("battery voltage (v)", "voltage", "power")
CORDLESS_KEY = "cordless / corded"
BRAND_KEY = "brand"
WARRANTY_KEY = "cs_manufacturer_warranty"
INTERNAL_KEY_PREFIX = "cs_"
PRIORITY_KEYS = ("capacity", "cartridge type", "weight", "dimensions", "material")
MAX_FEATURES = 3


def truncate(text: str, limit: int = MAX_DESCRIPTION_LENGTH) -> str:
    """Cut text longer than ``limit`` so it ends with an ellipsis."""
    if len(text) > limit:
        return text[:limit - len(ELLIPSIS)] + ELLIPSIS
    return text


class DescriptionStrategy:
    """Base class for synthesis strategies."""

    name = ""
    tool_description = ""

    def generate(self, request: DescriptionRequest, attributes: AttributeSet) -> str:
        raise NotImplementedError

    def synthesize(self, request: DescriptionRequest) -> DescriptionResult:
        attributes = parse(request.attributes)
        content = self.generate(request, attributes)
        logger.debug(f"{self.name} strategy produced {len(content)} characters for {request.part_number}")
        return DescriptionResult(
            content=content,
            product_name=request.product_name,
            part_number=request.part_number,
            attribute_count=len(request.attributes),
        )


class NaturalStrategy(DescriptionStrategy):
    """Compact single-paragraph description capped at 500 characters."""

    name = "natural"
    tool_description = (
        "Generates natural, AI-like product descriptions (up to 500 characters) "
        "dynamically based on any product attributes."
    )

    def generate(self, request: DescriptionRequest, attributes: AttributeSet) -> str:
        description = f"The {request.product_name} (Part# {request.part_number}) "
        description += self.opening_statement(attributes, request.type, request.tone)
        description += self.feature_highlights(attributes)
        description += self.brand_statement(attributes)
        description += self.warranty_statement(attributes)
        return truncate(description).strip()

    @staticmethod
    def opening_statement(attributes: AttributeSet, type: str, tone: str) -> str:
        has_power = attributes.has_any(*POWER_KEYS)
        is_cordless = (attributes.get(CORDLESS_KEY) or "").lower() == "cordless"

        if type.lower() == "ecommerce" and tone.lower() == "professional":
            if has_power and is_cordless:
                return "delivers powerful, reliable cordless performance for professional applications. "
            if has_power:
                return "offers consistent, professional-grade powered performance. "
            return "provides exceptional professional-grade quality and reliability. "

        if has_power and is_cordless:
            return "delivers powerful cordless performance. "
        if has_power:
            return "offers reliable powered performance. "
        return "provides professional-grade quality. "

    @staticmethod
    def is_feature(attribute: Attribute) -> bool:
        """Skip internal keys, yes/no flags and near-empty values."""
        return (
            INTERNAL_KEY_PREFIX not in attribute.key
            and attribute.key not in (BRAND_KEY, CORDLESS_KEY)
            and attribute.value.lower() not in ("yes", "no")
            and len(attribute.value) > 2
        )

    @staticmethod
    def priority(attribute: Attribute) -> int:
        return 0 if any(key in attribute.key for key in PRIORITY_KEYS) else 1

    @staticmethod
    def format_feature(attribute: Attribute) -> str:
        # Short values read better with their key unless they already mention it
        first_word = attribute.key.split(" ")[0]
        if len(attribute.value) < 15 and first_word not in attribute.value.lower():
            return f"{attribute.key}: {attribute.value}"
        return attribute.value

    def feature_highlights(self, attributes: AttributeSet) -> str:
        features = sorted(filter(self.is_feature, attributes), key=self.priority)[:MAX_FEATURES]
        if not features:
            return ""
        return f"Features include {', '.join(self.format_feature(a) for a in features)}. "

    @staticmethod
    def brand_statement(attributes: AttributeSet) -> str:
        brand = attributes.get(BRAND_KEY)
        if brand is not None:
            return f"Built with {brand} quality and reliability. "
        return ""

    @staticmethod
    def warranty_statement(attributes: AttributeSet) -> str:
        warranty = attributes.get(WARRANTY_KEY)
        if warranty is not None:
            warranty = warranty.replace(" limited warranty", "").split("/")[0]
            return f"Backed by {warranty} warranty. "
        return "Designed for demanding applications. "


class MarkdownStrategy(DescriptionStrategy):
    """Structured markdown report with fixed sections."""

    name = "markdown"
    tool_description = (
        "Generates structured markdown product descriptions with overview, features, "
        "specifications, benefits and applications sections."
    )

    PLACEHOLDER_FEATURES = [
        "**Premium Quality** - Built with superior materials and craftsmanship",
        "**Reliable Performance** - Engineered for consistent, dependable results",
        "**Versatile Design** - Suitable for a wide range of uses",
    ]
    STANDARD_FEATURES = [
        "**Quality Assurance** - Manufactured to meet strict quality standards",
        "**Customer Support** - Backed by dedicated customer service",
    ]
    BENEFITS = [
        "Trusted quality and long-lasting durability",
        "Excellent value for professional and personal use",
        "Designed with the end user in mind",
    ]
    APPLICATIONS = [
        "Commercial environments",
        "Industrial settings",
        "Professional workshops and job sites",
        "Everyday personal projects",
    ]

    def generate(self, request: DescriptionRequest, attributes: AttributeSet) -> str:
        name = request.product_name
        part = request.part_number
        count = len(attributes)

        lines = [f"# {name}", "", f"**Part Number:** {part}", ""]

        lines += ["## Overview", ""]
        overview = f"The {name} is a high-quality product designed to meet your needs."
        if count > 0:
            overview += f" This product features {count} key attributes that set it apart."
        lines += [overview, ""]

        lines += ["## Key Features", ""]
        features = [f"**{original}** - Enhances overall performance and value" for original in attributes.originals]
        features = (features or list(self.PLACEHOLDER_FEATURES)) + self.STANDARD_FEATURES
        lines += [f"{number}. {feature}" for number, feature in enumerate(features, 1)]
        lines.append("")

        lines += [
            "## Technical Specifications",
            "",
            f"- **Product Name:** {name}",
            f"- **Part Number:** {part}",
            f"- **Attributes Listed:** {count}",
            "",
        ]

        lines += ["## Product Attributes", ""]
        if count > 0:
            lines += [f"- {original}" for original in attributes.originals]
        else:
            lines.append("- No additional attributes specified")
        lines.append("")

        lines += ["## Why Choose This Product?", ""]
        lines += [f"- {benefit}" for benefit in self.BENEFITS]
        if count > 3:
            lines.append(f"- Extensive feature set with {count} documented attributes")
        lines.append("")

        lines += ["## Applications", ""]
        lines += [f"- {application}" for application in self.APPLICATIONS]
        lines.append("")
        if count > 0:
            lines.append(f"With its {count} specified attributes, the {name} is ready for a wide range of demanding applications.")
        else:
            lines.append(f"The {name} offers the versatility to handle a wide range of applications.")
        lines.append("")

        lines += ["---", "", f"*{name} (Part# {part})*"]
        return "\n".join(lines)


class SummaryStrategy(DescriptionStrategy):
    """Plain summary: the raw attribute strings joined into a sentence."""

    name = "summary"
    tool_description = "Generates a short plain-text product summary (up to 500 characters)."

    def generate(self, request: DescriptionRequest, attributes: AttributeSet) -> str:
        description = f"The {request.product_name} (Part# {request.part_number})"
        if len(attributes) > 0:
            description += f" features {', '.join(attributes.originals)}."
            description += " Designed for dependable everyday use."
        else:
            description += " is available now."
        return truncate(description).strip()


STRATEGIES: Dict[str, Type[DescriptionStrategy]] = {
    strategy.name: strategy
    for strategy in (NaturalStrategy, MarkdownStrategy, SummaryStrategy)
}


def get_strategy(name: str) -> DescriptionStrategy:
    """Instantiate the strategy registered under ``name``."""
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"Unknown description strategy '{name}', expected one of: {', '.join(STRATEGIES)}")


def strategy_names() -> List[str]:
    return list(STRATEGIES)
