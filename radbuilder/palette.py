"""Palette of available controls with their default sizes and properties."""

from __future__ import annotations

from typing import Any

from radbuilder.widget import Vec2, WidgetKind, WidgetProps

_SIZES: dict[WidgetKind, tuple[float, float]] = {
    WidgetKind.MenuButton: (180.0, 28.0),
    WidgetKind.Label: (140.0, 24.0),
    WidgetKind.Button: (160.0, 32.0),
    WidgetKind.ImageTextButton: (200.0, 36.0),
    WidgetKind.Checkbox: (160.0, 28.0),
    WidgetKind.TextEdit: (220.0, 36.0),
    WidgetKind.Slider: (220.0, 24.0),
    WidgetKind.ProgressBar: (220.0, 20.0),
    WidgetKind.RadioGroup: (200.0, 80.0),
    WidgetKind.Link: (160.0, 20.0),
    WidgetKind.Hyperlink: (200.0, 20.0),
    WidgetKind.SelectableLabel: (180.0, 24.0),
    WidgetKind.ComboBox: (220.0, 28.0),
    WidgetKind.Separator: (220.0, 8.0),
    WidgetKind.CollapsingHeader: (260.0, 80.0),
    WidgetKind.DatePicker: (200.0, 28.0),
    WidgetKind.AngleSelector: (220.0, 28.0),
    WidgetKind.Password: (220.0, 36.0),
    WidgetKind.Tree: (260.0, 200.0),
}

_PROPS: dict[WidgetKind, dict[str, Any]] = {
    WidgetKind.MenuButton: {
        "text": "Menu",
        "items": ["First", "Second", "Third"],
        "selected": 0,
    },
    WidgetKind.Label: {"text": "Label"},
    WidgetKind.Button: {"text": "Button"},
    WidgetKind.ImageTextButton: {"text": "Button", "icon": "🖼️"},
    WidgetKind.Checkbox: {"text": "Checkbox"},
    WidgetKind.TextEdit: {"text": "Type here"},
    WidgetKind.Slider: {
        "text": "Value",
        "min": 0.0,
        "max": 100.0,
        "value": 42.0,
        "checked": False,
    },
    WidgetKind.ProgressBar: {
        "text": "",
        "value": 0.25,
        "min": 0.0,
        "max": 1.0,
        "checked": False,
    },
    WidgetKind.RadioGroup: {
        "text": "Radio Group",
        "items": ["Option A", "Option B", "Option C"],
        "selected": 0,
    },
    WidgetKind.Link: {"text": "Link text"},
    WidgetKind.Hyperlink: {"text": "Open website", "url": "https://example.com"},
    WidgetKind.SelectableLabel: {"text": "Selectable", "checked": False},
    WidgetKind.ComboBox: {
        "text": "Choose one",
        "items": ["Red", "Green", "Blue"],
        "selected": 0,
    },
    WidgetKind.Separator: {},
    WidgetKind.CollapsingHeader: {"text": "Section", "checked": True},
    WidgetKind.DatePicker: {"text": "Pick a date", "year": 2025, "month": 1, "day": 1},
    WidgetKind.AngleSelector: {
        "text": "Angle (deg)",
        "min": 0.0,
        "max": 360.0,
        "value": 45.0,
    },
    WidgetKind.Password: {"text": "password"},
    # Two leading spaces per level define the hierarchy.
    WidgetKind.Tree: {
        "text": "Tree",
        "items": [
            "Animals",
            "  Mammals",
            "    Dogs",
            "    Cats",
            "  Birds",
            "Plants",
            "  Trees",
            "  Flowers",
        ],
    },
}

_ENTRIES: tuple[tuple[str, WidgetKind], ...] = (
    ("Menu Button", WidgetKind.MenuButton),
    ("Label", WidgetKind.Label),
    ("Button", WidgetKind.Button),
    ("Image + Text Button", WidgetKind.ImageTextButton),
    ("Checkbox", WidgetKind.Checkbox),
    ("TextEdit", WidgetKind.TextEdit),
    ("Slider", WidgetKind.Slider),
    ("ProgressBar", WidgetKind.ProgressBar),
    ("Radio Group", WidgetKind.RadioGroup),
    ("Link", WidgetKind.Link),
    ("Hyperlink", WidgetKind.Hyperlink),
    ("Selectable Label", WidgetKind.SelectableLabel),
    ("Combo Box", WidgetKind.ComboBox),
    ("Separator", WidgetKind.Separator),
    ("Collapsing Header", WidgetKind.CollapsingHeader),
    ("Date Picker", WidgetKind.DatePicker),
    ("Angle Selector", WidgetKind.AngleSelector),
    ("Password", WidgetKind.Password),
    ("Tree", WidgetKind.Tree),
)


def default_size(kind: WidgetKind) -> Vec2:
    """Size a freshly dropped widget of ``kind`` gets."""
    width, height = _SIZES[kind]
    return Vec2(width, height)


def default_props(kind: WidgetKind) -> WidgetProps:
    """A new, independent set of initial properties for ``kind``."""
    overrides = {
        key: list(value) if isinstance(value, list) else value
        for key, value in _PROPS[kind].items()
    }
    return WidgetProps(**overrides)


def palette_entries() -> list[tuple[str, WidgetKind]]:
    """Palette labels and kinds, in display order."""
    return list(_ENTRIES)