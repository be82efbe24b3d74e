"""Google Gemini wrapper used to phrase recommendations.

Optional collaborator: when no GEMINI_API_KEY is configured ``get_client``
returns None and callers stay on the rule-based path.
"""

import json
import logging
import re
from typing import Any, Protocol

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


class LLMError(RuntimeError):
    """The model answered, but not with usable JSON."""


class JSONGenerator(Protocol):
    async def generate_json(
        self,
        prompt: str,
        *,
        temperature: float = ...,
        max_output_tokens: int = ...,
    ) -> Any: ...


def parse_json_text(text: str) -> Any:
    """Parse a model reply as JSON, tolerating markdown code fences."""
    text = (text or "").strip()
    if not text:
        raise LLMError("Empty response from model")
    fenced = _FENCE_RE.search(text)
    if fenced:
        text = fenced.group(1)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise LLMError(f"Model returned invalid JSON: {e}") from e


class GeminiClient:
    def __init__(self, api_key: str, model: str | None = None) -> None:
        self._client = genai.Client(api_key=api_key)
        self.model = model or settings.gemini_model

    async def generate_json(
        self,
        prompt: str,
        *,
        temperature: float = 0.3,
        max_output_tokens: int = 1024,
    ) -> Any:
        """Send a prompt to Gemini and parse the JSON response.

        Raises on transport errors and on unparsable output; the caller
        decides what a failure means.
        """
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_output_tokens,
                response_mime_type="application/json",
            ),
        )
        try:
            return parse_json_text(response.text)
        except LLMError:
            logger.error("Failed to parse Gemini response as JSON")
            raise


_client: GeminiClient | None = None


def get_client() -> GeminiClient | None:
    global _client
    if not settings.gemini_api_key:
        logger.debug("No GEMINI_API_KEY set - recommendation rewrite disabled")
        return None
    if _client is None:
        _client = GeminiClient(settings.gemini_api_key)
    return _client
