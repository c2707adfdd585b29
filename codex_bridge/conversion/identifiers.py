"""Tool name and call identifier shortening.

The Codex backend caps tool names and call identifiers at 64 characters.
Names are shortened readably (keeping the tool suffix of mcp-namespaced names)
and kept unique within one conversion; call identifiers are replaced by a
``call_`` prefixed SHA-256 digest so matching calls and outputs still agree.
"""

import hashlib
import logging
from collections.abc import Iterable

from codex_bridge.core.constants import Constants

logger = logging.getLogger(__name__)

LIMIT = Constants.IDENTIFIER_MAX_LENGTH


def shorten_name(name: str, limit: int = LIMIT) -> str:
    """Shorten a single tool name to at most ``limit`` characters.

    ``mcp__server__tool`` style names keep the prefix and the segment after
    the last ``__``; everything else is truncated.
    """
    if len(name) <= limit:
        return name
    prefix = Constants.MCP_NAME_PREFIX
    if name.startswith(prefix):
        idx = name.rfind(Constants.MCP_NAME_SEPARATOR)
        if idx >= len(prefix):
            candidate = prefix + name[idx + len(Constants.MCP_NAME_SEPARATOR) :]
            return candidate[:limit]
    return name[:limit]


def make_unique(candidate: str, used: set[str], limit: int = LIMIT) -> str:
    """Append ``_1``, ``_2``, ... to ``candidate`` until it is not in ``used``."""
    if candidate not in used:
        return candidate
    i = 1
    while True:
        suffix = f"_{i}"
        allowed = max(limit - len(suffix), 0)
        unique = candidate[:allowed] + suffix
        if unique not in used:
            return unique
        i += 1


def shorten_call_id(call_id: str, limit: int = LIMIT) -> str:
    """Replace an over-length call id with ``call_`` plus a SHA-256 hex prefix."""
    if len(call_id) <= limit:
        return call_id
    digest = hashlib.sha256(call_id.encode("utf-8")).hexdigest()
    available = max(limit - len(Constants.CALL_ID_PREFIX), 0)
    return Constants.CALL_ID_PREFIX + digest[:available]


class IdentifierRegistry:
    """Per-conversion alias tables for tool names and call identifiers.

    One registry is created for each conversion call and dropped with it.
    Lookups are idempotent: the same original value always resolves to the
    same alias, which keeps a tool definition and its calls in agreement and
    a function_call and its function_call_output correlated.
    """

    def __init__(self, limit: int = LIMIT) -> None:
        self.limit = limit
        self.tool_names: dict[str, str] = {}
        self.call_ids: dict[str, str] = {}
        self._used_names: set[str] = set()
        self._declared: set[str] = set()

    def register_tool_names(self, names: Iterable[str]) -> dict[str, str]:
        """Assign aliases for a declared tool set in declaration order.

        Aliases are unique across the set; a name declared twice keeps the
        alias it was first given.
        """
        for name in names:
            self._declared.add(name)
            self.tool_name(name)
        return dict(self.tool_names)

    def is_declared(self, name: str) -> bool:
        """True only for names passed to register_tool_names."""
        return name in self._declared

    def tool_name(self, name: str) -> str:
        """Alias for ``name``, registering it if it has not been seen yet."""
        alias = self.tool_names.get(name)
        if alias is not None:
            return alias
        alias = make_unique(shorten_name(name, self.limit), self._used_names, self.limit)
        self._used_names.add(alias)
        self.tool_names[name] = alias
        if alias != name:
            logger.debug(f"Tool name shortened: {name!r} -> {alias!r}")
        return alias

    def call_id(self, call_id: str) -> str:
        if not call_id or len(call_id) <= self.limit:
            return call_id
        short = self.call_ids.get(call_id)
        if short is None:
            short = shorten_call_id(call_id, self.limit)
            self.call_ids[call_id] = short
            logger.debug(f"Call id shortened: {call_id[:16]}... -> {short}")
        return short

    @property
    def shortened_tool_names(self) -> int:
        return sum(1 for name, alias in self.tool_names.items() if name != alias)

    @property
    def shortened_call_ids(self) -> int:
        return len(self.call_ids)
