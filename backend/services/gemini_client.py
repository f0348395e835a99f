"""Google Gemini API wrapper with error handling.

The client is built once at startup (see main.lifespan) and handed to
request handlers through api.dependencies; None means "not configured".
"""

import asyncio
import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)


def build_client(api_key: str | None = None) -> genai.Client | None:
    api_key = settings.gemini_api_key if api_key is None else api_key
    if not api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini enhancement disabled")
        return None
    return genai.Client(api_key=api_key)


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_json(
    client: genai.Client,
    prompt: str,
    *,
    model: str | None = None,
    timeout: float | None = None,
    response_schema=None,
) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response.

    `response_schema` turns on structured output.
    Returns None on timeout, transport error, or unparseable output.
    """
    model = model or settings.gemini_model
    timeout = settings.gemini_timeout_seconds if timeout is None else timeout

    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=0.7,
                    max_output_tokens=4096,
                    response_mime_type="application/json",
                    response_schema=response_schema,
                ),
            ),
            timeout=timeout,
        )
        data = json.loads(_strip_code_fences(response.text or ""))

    except asyncio.TimeoutError:
        logger.error("Gemini call timed out after %.1fs", timeout)
        return None
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    if not isinstance(data, dict):
        logger.error("Gemini returned %s instead of a JSON object", type(data).__name__)
        return None
    return data
