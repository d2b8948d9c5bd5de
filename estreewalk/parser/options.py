"""Parser options consumed by the node factory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DeprecationMode(Enum):
    """How deprecated calling conventions are reported."""

    WARN = "warn"
    TRACE = "trace"
    ERROR = "error"


@dataclass
class ParserOptions:
    """Configuration for node construction."""

    # Attach and finalize ``loc`` on every node
    locations: bool = False
    # Attach and finalize a ``[start, end]`` ``range`` on every node
    ranges: bool = False
    # Fixed ``sourceFile`` tag stamped on every node
    direct_source_file: str | None = None
    # ``source`` recorded in every ``loc``
    source_file: str | None = None

    deprecation: DeprecationMode = DeprecationMode.WARN

    @classmethod
    def default(cls) -> ParserOptions:
        """Offsets only, deprecated calls warn once."""
        return cls()

    @classmethod
    def full(cls) -> ParserOptions:
        """Track both locations and ranges."""
        return cls(locations=True, ranges=True)

    @classmethod
    def strict(cls) -> ParserOptions:
        """Track locations and ranges and reject deprecated calls."""
        return cls(locations=True, ranges=True, deprecation=DeprecationMode.ERROR)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParserOptions:
        """Create options from a dictionary.

        Accepts snake_case keys as well as the camelCase spelling used by
        JavaScript tooling (``directSourceFile``, ``sourceFile``,
        ``throwDeprecation``, ``traceDeprecation``).
        """
        deprecation = data.get("deprecation", DeprecationMode.WARN)
        if data.get("throwDeprecation"):
            deprecation = DeprecationMode.ERROR
        elif data.get("traceDeprecation"):
            deprecation = DeprecationMode.TRACE

        return cls(
            locations=bool(data.get("locations", False)),
            ranges=bool(data.get("ranges", False)),
            direct_source_file=data.get("direct_source_file", data.get("directSourceFile")),
            source_file=data.get("source_file", data.get("sourceFile")),
            deprecation=DeprecationMode(deprecation),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "locations": self.locations,
            "ranges": self.ranges,
            "direct_source_file": self.direct_source_file,
            "source_file": self.source_file,
            "deprecation": self.deprecation.value,
        }
