"""Widget model: geometry, kinds, properties and small helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


def _field(data: Mapping[str, Any], key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _number(data: Mapping[str, Any], key: str) -> float:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


def _integer(data: Mapping[str, Any], key: str, *, unsigned: bool = False) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    if unsigned and value < 0:
        raise ValueError(f"field {key!r} must not be negative")
    return value


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = _field(data, key)
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


@dataclass(frozen=True)
class Vec2:
    """A 2D vector, also used for positions."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: object) -> Vec2:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def to_dict(self) -> dict[str, float]:
        return {"x": float(self.x), "y": float(self.y)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Vec2:
        return cls(_number(data, "x"), _number(data, "y"))


class DockArea(Enum):
    """Where a widget is docked in the generated layout."""

    FREE = "Free"
    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"
    CENTER = "Center"


class WidgetKind(Enum):
    """Every kind of control the builder knows."""

    MenuButton = "MenuButton"
    Label = "Label"
    Button = "Button"
    ImageTextButton = "ImageTextButton"
    Checkbox = "Checkbox"
    TextEdit = "TextEdit"
    Slider = "Slider"
    ProgressBar = "ProgressBar"
    RadioGroup = "RadioGroup"
    Link = "Link"
    Hyperlink = "Hyperlink"
    SelectableLabel = "SelectableLabel"
    ComboBox = "ComboBox"
    Separator = "Separator"
    CollapsingHeader = "CollapsingHeader"
    DatePicker = "DatePicker"
    AngleSelector = "AngleSelector"
    Password = "Password"
    Tree = "Tree"


def _kind_from_dict(data: Any) -> WidgetKind:
    tag = _string(data, "t")
    try:
        return WidgetKind(tag)
    except ValueError:
        raise ValueError(f"unknown widget kind {tag!r}") from None


def _area_from_value(value: Any) -> DockArea:
    try:
        return DockArea(value)
    except ValueError:
        raise ValueError(f"unknown dock area {value!r}") from None


@dataclass
class WidgetProps:
    """Editable properties shared by all widget kinds."""

    text: str = "Label"
    checked: bool = False
    value: float = 0.5
    min: float = 0.0
    max: float = 1.0
    items: list[str] = field(default_factory=list)
    selected: int = 0
    url: str = "https://example.com"
    year: int = 2024
    month: int = 1
    day: int = 1
    icon: str = "🖼️"

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "checked": self.checked,
            "value": float(self.value),
            "min": float(self.min),
            "max": float(self.max),
            "items": list(self.items),
            "selected": self.selected,
            "url": self.url,
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "icon": self.icon,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WidgetProps:
        items = _field(data, "items")
        if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
            raise ValueError("field 'items' must be a list of strings")
        return cls(
            text=_string(data, "text"),
            checked=_boolean(data, "checked"),
            value=_number(data, "value"),
            min=_number(data, "min"),
            max=_number(data, "max"),
            items=list(items),
            selected=_integer(data, "selected", unsigned=True),
            url=_string(data, "url"),
            year=_integer(data, "year"),
            month=_integer(data, "month", unsigned=True),
            day=_integer(data, "day", unsigned=True),
            icon=_string(data, "icon"),
        )


@dataclass
class Widget:
    """A placed control: position is the top-left corner relative to its area."""

    id: int
    kind: WidgetKind
    pos: Vec2
    size: Vec2
    z: int
    area: DockArea = DockArea.FREE
    props: WidgetProps = field(default_factory=WidgetProps)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": {"t": self.kind.value},
            "pos": self.pos.to_dict(),
            "size": self.size.to_dict(),
            "z": self.z,
            "area": self.area.value,
            "props": self.props.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Widget:
        return cls(
            id=_integer(data, "id", unsigned=True),
            kind=_kind_from_dict(_field(data, "kind")),
            pos=Vec2.from_dict(_field(data, "pos")),
            size=Vec2.from_dict(_field(data, "size")),
            z=_integer(data, "z"),
            area=_area_from_value(_field(data, "area")),
            props=WidgetProps.from_dict(_field(data, "props")),
        )


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def snap_pos_with_grid(p: Vec2, grid: float) -> Vec2:
    """Round a position to the nearest multiple of ``grid`` on each axis."""
    return Vec2(
        _round_half_away(p.x / grid) * grid,
        _round_half_away(p.y / grid) * grid,
    )


def escape(s: str) -> str:
    """Escape backslashes and double quotes for a string literal."""
    return s.replace("\\", "\\\\").replace('"', '\\"')