"""Tests for the schema definitions module."""

import pytest
from pydantic import ValidationError

from announcement_analyzer.ai.errors import MalformedOutputError, ProviderError
from announcement_analyzer.ai.schemas import (
    ARRAY_WRAPPING,
    FEATURE_OBJECT_SCHEMA,
    OBJECT_WRAPPING,
    PROVIDER_WRAPPINGS,
    WRAPPER_KEY,
    FeatureRecord,
    GuideResult,
    ModelProvider,
    unwrap_features,
)

FEATURE = {
    "name": "Image mode for RHEL",
    "summary": "Build RHEL hosts from container images.",
    "useCases": ["Edge fleets", "Immutable servers", "CI test hosts"],
}


class TestSchemaDefinitions:
    """Test cases for the JSON schemas and provider wrappings."""

    def test_feature_schema_requires_all_fields(self):
        """Test that every field of a feature record is required."""
        assert FEATURE_OBJECT_SCHEMA["required"] == ["name", "summary", "useCases"]
        assert FEATURE_OBJECT_SCHEMA["properties"]["useCases"]["items"] == {"type": "string"}

    def test_array_wrapping(self):
        """Test that the array wrapping is a bare array of feature objects."""
        assert ARRAY_WRAPPING.json_schema == {"type": "array", "items": FEATURE_OBJECT_SCHEMA}
        assert ARRAY_WRAPPING.wrapper_key is None

    def test_object_wrapping(self):
        """Test that the object wrapping holds the array under a required key."""
        schema = OBJECT_WRAPPING.json_schema
        assert schema["type"] == "object"
        assert schema["required"] == [WRAPPER_KEY]
        assert schema["properties"][WRAPPER_KEY]["items"] is FEATURE_OBJECT_SCHEMA
        assert OBJECT_WRAPPING.wrapper_key == "extractedFeatures"

    def test_provider_wrappings(self):
        """Test that each provider is mapped to the wrapping it can produce."""
        assert PROVIDER_WRAPPINGS[ModelProvider.GEMINI] is ARRAY_WRAPPING
        assert PROVIDER_WRAPPINGS[ModelProvider.OPENAI] is OBJECT_WRAPPING

    def test_model_provider_values(self):
        """Test that providers can be built from their lower-case names."""
        assert ModelProvider("gemini") is ModelProvider.GEMINI
        assert ModelProvider("openai") is ModelProvider.OPENAI
        with pytest.raises(ValueError):
            ModelProvider("anthropic")


class TestFeatureRecord:
    """Test cases for the FeatureRecord model."""

    def test_from_wire_format(self):
        """Test that records are built from the camel-case wire keys."""
        record = FeatureRecord.model_validate(FEATURE)

        assert record.name == "Image mode for RHEL"
        assert record.use_cases == ["Edge fleets", "Immutable servers", "CI test hosts"]

    def test_populate_by_field_name(self):
        """Test that records can also be built with the Python field names."""
        record = FeatureRecord(name="A", summary="B", use_cases=[])
        assert record.use_cases == []

    def test_missing_field_is_rejected(self):
        """Test that a missing use case list is not defaulted."""
        with pytest.raises(ValidationError):
            FeatureRecord.model_validate({"name": "A", "summary": "B"})

    def test_empty_name_is_rejected(self):
        """Test that an empty name is rejected."""
        with pytest.raises(ValidationError):
            FeatureRecord.model_validate({**FEATURE, "name": ""})

    def test_record_is_frozen(self):
        """Test that records cannot be changed after creation."""
        record = FeatureRecord.model_validate(FEATURE)
        with pytest.raises(ValidationError):
            record.name = "Other"

    def test_guide_result_defaults(self):
        """Test that a guide result has no infographic unless given one."""
        result = GuideResult(html="<p>Guide</p>")
        assert result.infographic_html is None


class TestUnwrapFeatures:
    """Test cases for unwrap_features."""

    def test_unwrap_array(self):
        """Test that a bare array is validated into records."""
        records = unwrap_features([FEATURE, FEATURE], ARRAY_WRAPPING)

        assert len(records) == 2
        assert all(isinstance(record, FeatureRecord) for record in records)

    def test_unwrap_object(self):
        """Test that the wrapped array is read from the wrapper key."""
        records = unwrap_features({WRAPPER_KEY: [FEATURE]}, OBJECT_WRAPPING)

        assert [record.name for record in records] == ["Image mode for RHEL"]

    def test_wrappings_normalise_to_the_same_records(self):
        """Test that both wrappings of the same features give equal records."""
        assert unwrap_features([FEATURE], ARRAY_WRAPPING) == unwrap_features(
            {WRAPPER_KEY: [FEATURE]}, OBJECT_WRAPPING
        )

    def test_unwrap_object_missing_key(self):
        """Test that an object without the wrapper key gives no records."""
        assert unwrap_features({}, OBJECT_WRAPPING) == []

    def test_unwrap_array_rejects_object(self):
        """Test that an object is rejected when an array was requested."""
        with pytest.raises(MalformedOutputError):
            unwrap_features({WRAPPER_KEY: [FEATURE]}, ARRAY_WRAPPING)

    def test_unwrap_object_rejects_array(self):
        """Test that an array is rejected when an object was requested."""
        with pytest.raises(MalformedOutputError) as exc_info:
            unwrap_features([FEATURE], OBJECT_WRAPPING)

        assert isinstance(exc_info.value, ProviderError)
        assert "[FEATURE_OBJECT]" in str(exc_info.value)

    def test_unwrap_object_rejects_non_array_value(self):
        """Test that the wrapper key must hold an array."""
        with pytest.raises(MalformedOutputError):
            unwrap_features({WRAPPER_KEY: FEATURE}, OBJECT_WRAPPING)

    def test_unwrap_invalid_record(self):
        """Test that a record missing a field fails validation."""
        with pytest.raises(ValidationError):
            unwrap_features([{"name": "A", "useCases": []}], ARRAY_WRAPPING)
