"""Permissive JSON document access.

JsonDocument wraps a parsed JSON object and exposes path-based reads where
every call site names its own default, plus the handful of writes the
converters need (set, raw substitution, append, delete).

Paths are dotted strings ("text.format.type"). Integer segments index lists,
and a trailing "-1" on append means "end of list".
"""

import json
import logging
import math
from typing import Any

from codex_bridge.core.error_types import ConversionError, ConversionErrorType

logger = logging.getLogger(__name__)

_MISSING = object()

# Deeper documents are refused up front; copying and re-encoding them would
# exhaust the interpreter stack
MAX_NESTING_DEPTH = 256


def _split(path: str) -> list[str]:
    return [segment for segment in path.split(".") if segment] if path else []


def _step(node: Any, segment: str) -> Any:
    """Descend one path segment, returning _MISSING when it does not resolve."""
    if isinstance(node, dict):
        return node.get(segment, _MISSING)
    if isinstance(node, list):
        try:
            index = int(segment)
        except ValueError:
            return _MISSING
        if -len(node) <= index < len(node):
            return node[index]
    return _MISSING


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads(raw: bytes | str) -> Any:
    """Strict JSON decoding: NaN, Infinity and overflowing numbers are rejected.

    Raises:
        ValueError: On invalid JSON, including bodies nested too deeply to decode.
    """
    try:
        return json.loads(raw, parse_float=_finite_float, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ValueError("JSON is nested too deeply") from e


def nesting_depth(value: Any) -> int:
    """Number of nested object/array levels in ``value``, counted without recursion."""
    depth = 0
    level = [value] if isinstance(value, (dict, list)) else []
    while level:
        depth += 1
        level = [
            child
            for node in level
            for child in (node.values() if isinstance(node, dict) else node)
            if isinstance(child, (dict, list))
        ]
    return depth


def dumps(value: Any, ensure_ascii: bool = False) -> str:
    """Compact JSON text, the form raw values take when inlined as strings."""
    return json.dumps(
        value, ensure_ascii=ensure_ascii, allow_nan=False, separators=(",", ":")
    )


def as_text(value: Any, default: str = "") -> str:
    """Render a JSON value as text.

    Strings come back as-is, None as ``default``, anything else as compact JSON.
    """
    if value is None:
        return default
    if isinstance(value, str):
        return value
    return dumps(value)


class JsonDocument:
    """Mutable view over one parsed JSON object."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = data if data is not None else {}

    @classmethod
    def parse(cls, raw: bytes | str) -> "JsonDocument":
        """Parse ``raw`` into a document.

        Raises:
            ValueError: If ``raw`` is not JSON, its root is not an object, or it
                is nested deeper than MAX_NESTING_DEPTH.
        """
        parsed = loads(raw)
        if not isinstance(parsed, dict):
            raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
        if nesting_depth(parsed) > MAX_NESTING_DEPTH:
            raise ValueError(f"JSON is nested deeper than {MAX_NESTING_DEPTH} levels")
        return cls(parsed)

    @classmethod
    def parse_lenient(cls, raw: bytes | str) -> "JsonDocument":
        """Parse ``raw``, treating anything unparseable as an empty object."""
        try:
            return cls.parse(raw)
        except ValueError as e:
            logger.warning(f"Request body is not a JSON object, treating it as empty: {e}")
            return cls({})

    # Reads

    def get(self, path: str, default: Any = None) -> Any:
        node: Any = self.data
        for segment in _split(path):
            node = _step(node, segment)
            if node is _MISSING:
                return default
        return node

    def exists(self, path: str) -> bool:
        return self.get(path, _MISSING) is not _MISSING

    def get_str(self, path: str, default: str = "") -> str:
        value = self.get(path, default)
        return value if isinstance(value, str) else default

    def get_list(self, path: str, default: list[Any] | None = None) -> list[Any] | None:
        value = self.get(path, default)
        return value if isinstance(value, list) else default

    def get_dict(self, path: str, default: dict[str, Any] | None = None) -> dict[str, Any] | None:
        value = self.get(path, default)
        return value if isinstance(value, dict) else default

    # Writes

    def _parent(self, path: str, create: bool) -> tuple[Any, str]:
        segments = _split(path)
        if not segments:
            raise KeyError("empty path")
        node: Any = self.data
        for segment in segments[:-1]:
            nxt = _step(node, segment)
            if nxt is _MISSING or not isinstance(nxt, (dict, list)):
                if not create or not isinstance(node, dict):
                    raise KeyError(path)
                nxt = {}
                node[segment] = nxt
            node = nxt
        return node, segments[-1]

    def set(self, path: str, value: Any) -> "JsonDocument":
        """Set ``path`` to ``value``, creating intermediate objects."""
        parent, key = self._parent(path, create=True)
        if isinstance(parent, list):
            parent[int(key)] = value
        else:
            parent[key] = value
        return self

    def set_raw(self, path: str, raw: str | bytes) -> "JsonDocument":
        """Substitute already-encoded JSON text at ``path``."""
        return self.set(path, loads(raw))

    def append(self, path: str, value: Any) -> "JsonDocument":
        """Append ``value`` to the list at ``path``, creating it when absent."""
        segments = _split(path)
        if segments and segments[-1] == "-1":
            path = ".".join(segments[:-1])
        current = self.get(path, None)
        if not isinstance(current, list):
            current = []
            self.set(path, current)
        current.append(value)
        return self

    def delete(self, path: str) -> bool:
        """Remove ``path``; returns True when something was removed."""
        try:
            parent, key = self._parent(path, create=False)
        except KeyError:
            return False
        if isinstance(parent, dict) and key in parent:
            del parent[key]
            return True
        if isinstance(parent, list):
            try:
                del parent[int(key)]
            except (ValueError, IndexError):
                return False
            return True
        return False

    def to_bytes(self) -> bytes:
        try:
            return dumps(self.data).encode("utf-8")
        except UnicodeEncodeError:
            # Lone surrogates only survive as \uXXXX escapes
            return dumps(self.data, ensure_ascii=True).encode("ascii")


def parse_request_body(raw: bytes | str, strict: bool) -> JsonDocument:
    """Parse a request body for conversion.

    Lenient parsing turns an unusable body into an empty document; strict
    parsing raises instead.

    Raises:
        ConversionError: In strict mode, when the body is not a JSON object.
    """
    if not strict:
        return JsonDocument.parse_lenient(raw)
    try:
        return JsonDocument.parse(raw)
    except ValueError as e:
        raise ConversionError(ConversionErrorType.MALFORMED_REQUEST, str(e)) from e
