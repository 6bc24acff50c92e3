"""A builder project: the placed widgets and layout settings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

from radbuilder.widget import Vec2, Widget


def _get(data: Mapping[str, Any], key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _flag(data: Mapping[str, Any], key: str) -> bool:
    value = _get(data, key)
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


@dataclass
class Project:
    """All widgets plus canvas size and which side panels are enabled."""

    widgets: list[Widget] = field(default_factory=list)
    canvas_size: Vec2 = field(default_factory=lambda: Vec2(700.0, 600.0))
    panel_top_enabled: bool = False
    panel_bottom_enabled: bool = False
    panel_left_enabled: bool = False
    panel_right_enabled: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "widgets": [w.to_dict() for w in self.widgets],
            "canvas_size": self.canvas_size.to_dict(),
            "panel_top_enabled": self.panel_top_enabled,
            "panel_bottom_enabled": self.panel_bottom_enabled,
            "panel_left_enabled": self.panel_left_enabled,
            "panel_right_enabled": self.panel_right_enabled,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Project:
        widgets = _get(data, "widgets")
        if not isinstance(widgets, list):
            raise ValueError("field 'widgets' must be a list")
        return cls(
            widgets=[Widget.from_dict(w) for w in widgets],
            canvas_size=Vec2.from_dict(_get(data, "canvas_size")),
            panel_top_enabled=_flag(data, "panel_top_enabled"),
            panel_bottom_enabled=_flag(data, "panel_bottom_enabled"),
            panel_left_enabled=_flag(data, "panel_left_enabled"),
            panel_right_enabled=_flag(data, "panel_right_enabled"),
        )

    def to_json(self) -> str:
        """Pretty-printed JSON text of the project."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Project:
        """Parse a project; raises ValueError on malformed input."""
        return cls.from_dict(json.loads(text))