"""
JSON envelope shared by every endpoint.

Success payloads are returned as-is; errors always look like
``{"status": "Error", "error": "<message>"}``.
"""

from typing import Any, Dict, List, Optional, Sequence

from fastapi.responses import JSONResponse

STATUS_ERROR = "Error"

EMPTY_BODY = "empty body"

# pydantic error type -> constraint description
_FIELD_MESSAGES = {
    "missing": "is a required field",
    "string_too_short": "is a required field",
    "greater_than": "must be greater than {gt}",
    "less_than_equal": "must be less than or equal to {le}",
    "int_type": "must be an integer",
    "string_type": "must be a string",
}


def general_error(message: str) -> Dict[str, str]:
    return {"status": STATUS_ERROR, "error": message}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=general_error(message))


def _field_name(loc: Sequence[Any]) -> str:
    return ".".join(str(part) for part in loc[1:])


def body_decode_error(errors: Sequence[Dict[str, Any]], body: Any = None) -> Optional[str]:
    """
    Return the message for a body that could not be decoded at all,
    or None when the body decoded and only its fields are wrong.
    ``body`` is the raw document when JSON decoding failed; a document
    holding only whitespace counts as empty.
    """
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if not loc or loc[0] != "body":
            continue
        if error["type"] == "json_invalid":
            if isinstance(body, (str, bytes)) and not body.strip():
                return EMPTY_BODY
            reason = error.get("ctx", {}).get("error")
            return f"{error['msg']}: {reason}" if reason else error["msg"]
        if len(loc) == 1:
            # The body itself, not one of its fields
            if error["type"] == "missing":
                return EMPTY_BODY
            return error["msg"]
    return None


def field_error(error: Dict[str, Any]) -> str:
    loc = tuple(error.get("loc", ()))
    field = _field_name(loc)

    # Path and query parameters echo the parse failure
    if loc and loc[0] != "body":
        return f"{field}: {error['msg']}"

    template = _FIELD_MESSAGES.get(error["type"])
    if template is not None:
        return f"field {field} " + template.format(**error.get("ctx", {}))
    if error["type"] == "value_error":
        # e.g. "value is not a valid email address: ..."
        return f"field {field} " + error["msg"].removeprefix("value ")
    return f"field {field} is invalid"


def validation_error(errors: Sequence[Dict[str, Any]]) -> str:
    messages: List[str] = [field_error(error) for error in errors]
    return ", ".join(messages)
