"""Template filling and response decoding shared by every provider."""

from __future__ import annotations

import json
import re
from typing import Any, Mapping

import structlog

from autotest_core.errors import DecodeError

logger = structlog.get_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")

# ```json fences win over bare ``` fences
JSON_FENCE_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)
ANY_FENCE_PATTERN = re.compile(r"```\s*([\s\S]*?)\s*```")

DECODE_FAILED = "decode failed"


def fill_template(template: str, values: Mapping[str, Any]) -> str:
    """
    Substitute ``{key}`` placeholders from a flat mapping.

    Placeholders without a matching key are left intact. Dicts and lists are
    rendered as JSON, None as an empty string.

    Args:
        template: Prompt template text
        values: Flat key -> value mapping

    Returns:
        The filled prompt
    """
    if not template:
        return ""

    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        return _render_value(values[key])

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def _render_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def extract_payload(text: str) -> str:
    """Return the content of the first fenced block, or the whole text."""
    match = JSON_FENCE_PATTERN.search(text) or ANY_FENCE_PATTERN.search(text)
    if match:
        return match.group(1)
    return text


def decode_response(text: str, strict: bool = False) -> Any:
    """
    Decode a vendor response into structured data.

    Looks for a fenced block first and falls back to the whole text. A
    failure is returned as ``{"error": "decode failed", "raw": text}``.

    Args:
        text: Message text returned by the vendor
        strict: Raise DecodeError instead of returning the sentinel

    Returns:
        The decoded value or the sentinel dict
    """
    if text is None:
        text = ""

    try:
        return json.loads(extract_payload(text))
    except (json.JSONDecodeError, TypeError):
        if strict:
            raise DecodeError(text)
        logger.warning("Response decode failed", raw_length=len(text))
        return {"error": DECODE_FAILED, "raw": text}


def is_decode_failure(value: Any) -> bool:
    """True if ``value`` is the sentinel produced by a failed decode."""
    return isinstance(value, dict) and value.get("error") == DECODE_FAILED and "raw" in value


def to_prompt_json(value: Any) -> str:
    """Pretty JSON for values appended to a prompt."""
    if hasattr(value, "to_dict"):
        value = value.to_dict()
    elif isinstance(value, (list, tuple)):
        value = [v.to_dict() if hasattr(v, "to_dict") else v for v in value]
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)
