"""Provider adapters for the announcement analyzer.

Gemini and OpenAI expose structured output in different ways. Gemini can be
constrained to a JSON schema directly, including a bare array, while OpenAI
is driven through a forced function call whose arguments must be an object.
The adapters hide that difference behind one interface: ``extract`` returns
feature records and ``generate_text`` returns raw text.

Requests are issued with ``pydantic_ai.direct.model_request`` so each call is
exactly one model request, with no agent loop and no retries.
"""

import copy
import json
from abc import ABC, abstractmethod
from typing import List

from pydantic_ai.direct import model_request
from pydantic_ai.messages import (
    ModelRequest,
    ModelResponse,
    TextPart,
    ToolCallPart,
    UserPromptPart,
)
from pydantic_ai.models import Model, ModelRequestParameters
from pydantic_ai.output import OutputObjectDefinition
from pydantic_ai.settings import ModelSettings
from pydantic_ai.tools import ToolDefinition

from announcement_analyzer.ai.errors import MalformedOutputError, ProviderError
from announcement_analyzer.ai.sanitizer import unwrap_code_fence
from announcement_analyzer.ai.schemas import (
    FeatureRecord,
    ModelProvider,
    OutputShape,
    unwrap_features,
)
from announcement_analyzer.utils.logging_utils import get_logger

logger = get_logger("ai.adapters")

EXTRACTION_DESCRIPTION = (
    "Extracts product features and use cases from a Red Hat announcement article."
)


def response_text(response: ModelResponse) -> str:
    """Join the text parts of a model response."""
    return "".join(part.content for part in response.parts if isinstance(part, TextPart))


class ProviderAdapter(ABC):
    """Uniform interface over one LLM provider.

    Args:
        extraction_model: The pydantic-ai model used for structured extraction.
        text_model: The pydantic-ai model used for free-text generation.
        extraction_temperature: Sampling temperature for extraction requests.
    """

    provider: ModelProvider

    def __init__(
        self,
        extraction_model: Model,
        text_model: Model,
        extraction_temperature: float = 0.1,
    ):
        self.extraction_model = extraction_model
        self.text_model = text_model
        self.extraction_temperature = extraction_temperature

    @abstractmethod
    async def extract(self, prompt: str, shape: OutputShape) -> List[FeatureRecord]:
        """Issue one schema-constrained request and return the feature records.

        Args:
            prompt: The extraction prompt.
            shape: The top-level wrapping the provider should produce.

        Returns:
            The normalised feature records.

        Raises:
            ProviderError: If the request fails or the output is malformed.
            pydantic.ValidationError: If a record is missing a required field.
        """

    async def generate_text(self, prompt: str, temperature: float = 0.7) -> str:
        """Issue one free-text request and return the raw text.

        Args:
            prompt: The generation prompt.
            temperature: Sampling temperature.

        Returns:
            The text of the response.

        Raises:
            ProviderError: If the response contains no text.
        """
        response = await self._request(
            self.text_model, prompt, temperature, ModelRequestParameters()
        )
        text = response_text(response)
        if not text.strip():
            raise ProviderError(self.provider, "model returned an empty text response")

        logger.debug(f"[{self.provider.value.upper()}] Generated {len(text)} characters of text")
        return text

    async def _request(
        self,
        model: Model,
        prompt: str,
        temperature: float,
        parameters: ModelRequestParameters,
    ) -> ModelResponse:
        return await model_request(
            model,
            [ModelRequest(parts=[UserPromptPart(content=prompt)])],
            model_settings=ModelSettings(temperature=temperature),
            model_request_parameters=parameters,
        )

    def _decode(self, raw: str) -> object:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedOutputError(self.provider, f"response is not valid JSON: {e}") from e


class SchemaConstrainedAdapter(ProviderAdapter):
    """Adapter for providers with native JSON-schema output (Gemini)."""

    provider = ModelProvider.GEMINI

    async def extract(self, prompt: str, shape: OutputShape) -> List[FeatureRecord]:
        parameters = ModelRequestParameters(
            output_mode="native",
            output_object=OutputObjectDefinition(
                json_schema=copy.deepcopy(shape.json_schema),
                name=shape.name,
                description=EXTRACTION_DESCRIPTION,
            ),
            allow_text_output=True,
        )
        response = await self._request(
            self.extraction_model, prompt, self.extraction_temperature, parameters
        )

        payload = self._decode(unwrap_code_fence(response_text(response)))
        return unwrap_features(payload, shape)


class FunctionCallAdapter(ProviderAdapter):
    """Adapter for providers that return structured output as a function call (OpenAI)."""

    provider = ModelProvider.OPENAI
    function_name = "extract_features"

    async def extract(self, prompt: str, shape: OutputShape) -> List[FeatureRecord]:
        function = ToolDefinition(
            name=self.function_name,
            parameters_json_schema=copy.deepcopy(shape.json_schema),
            description=EXTRACTION_DESCRIPTION,
            kind="output",
        )
        # Without text output the model must call the single function.
        parameters = ModelRequestParameters(
            output_mode="tool",
            output_tools=[function],
            allow_text_output=False,
        )
        response = await self._request(
            self.extraction_model, prompt, self.extraction_temperature, parameters
        )

        call = next(
            (
                part
                for part in response.parts
                if isinstance(part, ToolCallPart) and part.tool_name == self.function_name
            ),
            None,
        )
        if call is None:
            raise MalformedOutputError(
                self.provider, f"model did not call the {self.function_name} function"
            )

        payload = self._decode(call.args_as_json_str())
        return unwrap_features(payload, shape)
