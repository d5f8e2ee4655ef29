"""Navigator-scoped shared value store."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class NavigatorContext:
    """Key/value store shared between the pages of one navigator.

    Keys are stored exactly as given; the last write to a key wins.
    """

    values: dict[str, object] = field(default_factory=dict)

    def set(self, key: str, value: object) -> None:
        """Store or replace a named value."""
        if not key.strip():
            raise ValueError("context key must not be blank")
        self.values[key] = value

    def get(self, key: str, default: object | None = None) -> object | None:
        """Return named value if present."""
        return self.values.get(key, default)

    def require(self, key: str) -> object:
        """Return named value or raise KeyError."""
        if key not in self.values:
            raise KeyError(f"missing navigator value: {key!r}")
        return self.values[key]

    def clear(self) -> None:
        self.values.clear()

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)
