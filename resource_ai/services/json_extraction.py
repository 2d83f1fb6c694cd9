"""
Recover structured JSON from free-form model answers.

Models asked for "ONLY valid JSON" still wrap it in markdown fences, surround
it with prose, or emit literal newlines inside string values. extract_json()
tries a fixed sequence of strategies and returns the first one that parses:

1. strip the surrounding code fence, parse the remainder
2. parse the widest {...} (or [...]) span
3. escape raw control characters inside string literals of (1), parse
4. same repair applied to (2), parse

Each step is a pure function so it can be tested on its own.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, List, Optional, Tuple

from ..exceptions import MalformedModelOutputError

logger = logging.getLogger(__name__)

_OPENING_FENCE_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE_RE = re.compile(r"\s*```$")

_CONTROL_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_UNSET = object()


def strip_code_fence(text: str) -> str:
    """
    Remove a leading ``` / ```json marker and a trailing ``` marker.

    Fences elsewhere in the text (inside string values) are left alone.
    """
    text = _OPENING_FENCE_RE.sub("", text.strip(), count=1)
    return _CLOSING_FENCE_RE.sub("", text, count=1).strip()


def isolate_json_span(text: str) -> Optional[str]:
    """
    Return the widest span from the first opening bracket to the last closing one.

    Objects are preferred; an array span wins only when it encloses the object
    span (a bare list of objects). Returns None when no span exists.
    """
    obj_start, obj_end = text.find("{"), text.rfind("}")
    arr_start, arr_end = text.find("["), text.rfind("]")

    obj = (obj_start, obj_end) if 0 <= obj_start < obj_end else None
    arr = (arr_start, arr_end) if 0 <= arr_start < arr_end else None

    if arr and (obj is None or (arr[0] < obj[0] and arr[1] > obj[1])):
        return text[arr[0]:arr[1] + 1]
    if obj:
        return text[obj[0]:obj[1] + 1]
    return None


def escape_control_chars_in_strings(text: str) -> str:
    """
    Escape literal newline, carriage return and tab characters inside JSON strings.

    String spans are delimited by unescaped double quotes. Whitespace between
    tokens is left as is.
    """
    out: List[str] = []
    in_string = False
    escaped = False

    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            elif ch in _CONTROL_ESCAPES:
                out.append(_CONTROL_ESCAPES[ch])
                continue
        elif ch == '"':
            in_string = True
        out.append(ch)

    return "".join(out)


def _try_parse(candidate: Optional[str]) -> Any:
    if not candidate:
        return _UNSET
    try:
        return json.loads(candidate)
    except ValueError:
        return _UNSET


def extract_json(text: str) -> Any:
    """
    Parse a model answer into a JSON value using the recovery cascade.

    Raises MalformedModelOutputError when no strategy produces valid JSON.
    """
    if not text or not text.strip():
        raise MalformedModelOutputError("Model returned no text")

    cleaned = strip_code_fence(text)
    span = isolate_json_span(cleaned)

    strategies: List[Tuple[str, Callable[[], Optional[str]]]] = [
        ("fenced", lambda: cleaned),
        ("span", lambda: span),
        ("fenced+repair", lambda: escape_control_chars_in_strings(cleaned)),
        ("span+repair", lambda: escape_control_chars_in_strings(span) if span else None),
    ]

    for name, candidate in strategies:
        value = _try_parse(candidate())
        if value is not _UNSET:
            if name.endswith("repair"):
                logger.warning("Model output needed string repair (%s)", name)
            else:
                logger.debug("Model output parsed via %s strategy", name)
            return value

    raise MalformedModelOutputError(f"Model did not return valid JSON: {text[:200]!r}")
