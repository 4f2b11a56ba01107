import json
import re
from typing import Any

from ..errors import AdapterError

_CODE_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)
_OPENING_BRACKET = re.compile(r"[\[{]")


def _candidates(text: str) -> list[str]:
    # Fenced blocks are tried before the raw reply
    return [*_CODE_FENCE.findall(text), text]


def extract_json(raw_text: str) -> Any:
    """Return the first well-formed JSON object or array in a model reply.

    Hosted models often wrap their JSON in prose or code fences; every
    opening bracket is tried as a start position until one decodes.

    Raises:
        AdapterError: If no bracketed JSON value can be decoded
    """
    decoder = json.JSONDecoder()
    for candidate in _candidates(raw_text):
        for match in _OPENING_BRACKET.finditer(candidate):
            try:
                parsed, _ = decoder.raw_decode(candidate, match.start())
            except json.JSONDecodeError:
                continue
            return parsed

    snippet = raw_text.strip().replace("\n", " ")
    snippet = (snippet[:200] + "...") if len(snippet) > 200 else snippet
    raise AdapterError(f"No JSON object found in response. Snippet: {snippet}")
