"""Schema definitions for feature extraction.

This module describes one extracted feature record and the two top-level
wrappings of a list of them. Gemini's structured output accepts a bare array,
while OpenAI function parameters must be an object, so the array is placed
under the ``extractedFeatures`` key for that provider.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from announcement_analyzer.ai.errors import MalformedOutputError


class ModelProvider(str, Enum):
    """Enum for supported model providers."""

    GEMINI = "gemini"
    OPENAI = "openai"


WRAPPER_KEY = "extractedFeatures"

FEATURE_OBJECT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "A concise, descriptive title for the product update or feature.",
        },
        "summary": {
            "type": "string",
            "description": (
                "A 2-3 sentence technical summary of what the new feature does "
                "or how the update works."
            ),
        },
        "useCases": {
            "type": "array",
            "items": {"type": "string"},
            "description": (
                "List three distinct, real-world use cases that this feature could address."
            ),
        },
    },
    "required": ["name", "summary", "useCases"],
}


@dataclass(frozen=True)
class OutputShape:
    """A top-level JSON schema and the key that holds the feature array, if any."""

    name: str
    json_schema: Dict[str, Any]
    wrapper_key: Optional[str] = None


ARRAY_WRAPPING = OutputShape(
    name="feature_array",
    json_schema={"type": "array", "items": FEATURE_OBJECT_SCHEMA},
)

OBJECT_WRAPPING = OutputShape(
    name="feature_object",
    json_schema={
        "type": "object",
        "properties": {
            WRAPPER_KEY: {
                "type": "array",
                "description": (
                    "A list of all extracted technical features and their associated use cases."
                ),
                "items": FEATURE_OBJECT_SCHEMA,
            }
        },
        "required": [WRAPPER_KEY],
    },
    wrapper_key=WRAPPER_KEY,
)

PROVIDER_WRAPPINGS: Dict[ModelProvider, OutputShape] = {
    ModelProvider.GEMINI: ARRAY_WRAPPING,
    ModelProvider.OPENAI: OBJECT_WRAPPING,
}


class FeatureRecord(BaseModel):
    """One extracted product update."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1, description="Short title of the feature")
    summary: str = Field(min_length=1, description="2-3 sentence technical description")
    use_cases: List[str] = Field(
        alias="useCases", description="Distinct real-world use cases, usually three"
    )


class GuideResult(BaseModel):
    """Sanitized guide markup plus the optional infographic fragment."""

    model_config = ConfigDict(frozen=True)

    html: str
    infographic_html: Optional[str] = None


_feature_list = TypeAdapter(List[FeatureRecord])


def unwrap_features(payload: Any, shape: OutputShape) -> List[FeatureRecord]:
    """Normalise a decoded provider payload into feature records.

    Args:
        payload: The JSON-decoded provider output.
        shape: The wrapping the provider was asked to produce.

    Returns:
        The validated feature records, in provider order.

    Raises:
        MalformedOutputError: If the payload does not match the wrapping.
        pydantic.ValidationError: If a record is missing a required field.
    """
    if shape.wrapper_key is None:
        if not isinstance(payload, list):
            raise MalformedOutputError(
                shape.name, f"expected a top-level array, got {type(payload).__name__}"
            )
        items = payload
    else:
        if not isinstance(payload, dict):
            raise MalformedOutputError(
                shape.name, f"expected a top-level object, got {type(payload).__name__}"
            )
        items = payload.get(shape.wrapper_key, [])
        if not isinstance(items, list):
            raise MalformedOutputError(
                shape.name, f"'{shape.wrapper_key}' must hold an array"
            )

    return _feature_list.validate_python(items)
