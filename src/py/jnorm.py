## jnorm.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p
import json
import math

class Structured:
    __slots__ = ("value", "data")

    def __init__(self, value, data):
        self.value = value
        self.data = bytes(data)

class Raw:
    __slots__ = ("data",)

    def __init__(self, data):
        self.data = bytes(data)

def is_json_path(path):
    return path.endswith(".json")

def _reject_constant(name):
    raise ValueError(f"{name} is not a JSON value")

def _finite_float(text):
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text} is out of range")
    return value

def parse(data):
    ## strict UTF-8, no NaN/Infinity, nesting deep enough to recurse counts as a parse failure
    try:
        text = bytes(data).decode("utf-8")
        return Structured(json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float), data)
    except (ValueError, RecursionError):
        return Raw(data)

def _dump(outcome, **kwargs):
    if not isinstance(outcome, Structured):
        return outcome.data
    try:
        return json.dumps(outcome.value, ensure_ascii=False, allow_nan=False, **kwargs).encode("utf-8")
    except (ValueError, RecursionError):
        return outcome.data

def minify(outcome):
    return _dump(outcome, separators=(",", ":"))

def prettify(outcome):
    return _dump(outcome, indent=2)

def minify_for(path, data):
    if not is_json_path(path):
        return bytes(data)
    return minify(parse(data))

def prettify_for(path, data):
    if not is_json_path(path):
        return bytes(data)
    return prettify(parse(data))

## end
