import logging
from typing import Optional, Protocol, Type, TypeVar

from google import genai
from google.genai import errors as genai_errors
from pydantic import BaseModel, ValidationError

from savannah_chase.assist.exceptions import (
    AssistConfigurationError,
    AssistRequestError,
    AssistResponseError,
)
from savannah_chase.config import get_settings

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class AssistClient(Protocol):
    """Anything able to answer a prompt dict with a validated ``schema`` instance."""

    async def generate(self, prompt: dict, schema: Type[SchemaT]) -> SchemaT: ...


class GeminiClient:
    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        settings = get_settings()
        api_key = api_key or settings.GEMINI_API_KEY
        if not api_key:
            raise AssistConfigurationError("SAVANNAH_GEMINI_API_KEY is not set")
        self.client = genai.Client(api_key=api_key)
        self.model_name = model_name or settings.ASSIST_MODEL

    async def generate(self, prompt: dict, schema: Type[SchemaT]) -> SchemaT:
        """Run ``prompt`` and return the structured output as ``schema``."""
        logger.debug("Requesting %s from %s", schema.__name__, self.model_name)
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt["user_prompt"],
                config={
                    "system_instruction": prompt["system_prompt"],
                    "response_mime_type": "application/json",
                    "response_schema": schema,
                },
            )
        except genai_errors.APIError as e:
            raise AssistRequestError(f"{self.model_name} request failed: {e}") from e

        if response.usage_metadata:
            logger.debug(
                "Token usage: prompt=%s, completion=%s, total=%s",
                response.usage_metadata.prompt_token_count,
                response.usage_metadata.candidates_token_count,
                response.usage_metadata.total_token_count,
            )

        if isinstance(response.parsed, schema):
            return response.parsed

        # Fall back to validating the raw JSON text
        if not response.text:
            raise AssistResponseError(f"Empty response for {schema.__name__}")
        try:
            return schema.model_validate_json(response.text)
        except ValidationError as e:
            raise AssistResponseError(
                f"Response does not match {schema.__name__}: {e}"
            ) from e
