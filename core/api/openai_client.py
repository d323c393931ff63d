"""
core.api.openai_client

Thin wrapper around the OpenAI Chat Completions API for Clinic Relay.

Used by:
  - core/extraction/patient_message_extractor.py
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError

from configs.settings import settings
from exceptions.exceptions import ExtractionError


# -------------------------------------------------------------------
# Client + config
# -------------------------------------------------------------------

# Created on first use so the app can start without OPENAI_API_KEY.
_client: Optional[OpenAI] = None


def get_client() -> OpenAI:
    """Return the shared OpenAI client, creating it from settings if needed."""
    global _client
    if _client is None:
        try:
            api_key = settings.openai_api_key
        except RuntimeError as e:
            raise ExtractionError("OpenAI client is not configured.", details=str(e))
        # No retries: a failed call fails the request.
        _client = OpenAI(
            api_key=api_key,
            base_url=settings.openai_base_url,
            max_retries=0,
        )
    return _client


def set_client(client: Optional[Any]) -> None:
    """Replace the shared client (None resets it to lazy creation)."""
    global _client
    _client = client


# -------------------------------------------------------------------
# Public function
# -------------------------------------------------------------------

def request_tool_call(
    messages: List[Dict[str, str]],
    tool: Dict[str, Any],
    *,
    model: Optional[str] = None,
    temperature: float = 0.0,
    client: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Send a chat request that forces a single function tool call and return
    the decoded tool arguments.

    Parameters
    ----------
    messages : list of dict
        Chat messages (role/content pairs), e.g. a system persona plus the
        user message.
    tool : dict
        Function definition (name, description, JSON-schema parameters).
        The model is forced to call exactly this function.
    model : str, optional
        Override the default model name.
    client : optional
        Client to use instead of the shared one.

    Returns
    -------
    dict
        The parsed JSON arguments of the tool call.

    Raises
    ------
    ExtractionError
        If the API call fails, or the response has no choices, no tool call,
        or arguments that are not a JSON object.
    """
    model_name = model or settings.openai_model
    client = client or get_client()

    try:
        completion = client.chat.completions.create(
            model=model_name,
            messages=messages,
            tools=[{"type": "function", "function": tool}],
            tool_choice={"type": "function", "function": {"name": tool["name"]}},
            temperature=temperature,
        )
    except OpenAIError as e:
        raise ExtractionError("OpenAI chat completion failed.", details=str(e)) from e

    if not completion.choices:
        raise ExtractionError("Empty response from OpenAI API.")

    tool_calls = completion.choices[0].message.tool_calls or []
    if not tool_calls:
        raise ExtractionError(
            f"OpenAI response did not include a '{tool['name']}' tool call."
        )

    raw_arguments = tool_calls[0].function.arguments
    try:
        arguments = json.loads(raw_arguments)
    except (TypeError, json.JSONDecodeError) as e:
        raise ExtractionError(
            "Failed to parse tool call arguments as JSON.",
            details=f"{e}\nRaw arguments: {raw_arguments}",
        ) from e

    if not isinstance(arguments, dict):
        raise ExtractionError(
            "Tool call arguments must be a JSON object.",
            details=f"Raw arguments: {raw_arguments}",
        )

    return arguments
