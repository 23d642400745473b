"""JSON response bodies of the form {"result", "info", "data"}."""

import json

CONTENT_TYPE = "application/json"

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _normalise(value):
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, (list, tuple)):
        return [_normalise(item) for item in value]
    if isinstance(value, dict):
        return {key: _normalise(item) for key, item in value.items()}
    return value


def _payload(data):
    if isinstance(data, bool):
        raise TypeError("unsupported response data type: bool")
    if isinstance(data, (list, tuple)):
        items = list(data)
        try:
            json.dumps(items, allow_nan=False)
        except ValueError:
            return None
        return _normalise(items)
    if isinstance(data, (int, str)):
        return data
    if isinstance(data, (bytes, bytearray)):
        return _normalise(json.loads(bytes(data)))
    raise TypeError(f"unsupported response data type: {type(data).__name__}")


def build_response(data, status=200, result="ok", message=""):
    """Build ``(status, content_type, body)`` for ``data``.

    Lists and tuples are encoded as JSON arrays, ints as numbers, strings as
    JSON strings and bytes are taken as ready-made JSON. Other types raise
    ``TypeError``.
    """
    body = {"result": result, "info": message, "data": _payload(data)}
    text = json.dumps(body, indent=4, ensure_ascii=False, allow_nan=False)
    for char, escape in _ESCAPES.items():
        text = text.replace(char, escape)
    return status, CONTENT_TYPE, text.encode("utf-8")