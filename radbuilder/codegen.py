"""Whole-program source generation for a designed project."""

from __future__ import annotations

from typing import Iterator

from radbuilder.emit import emit_widget
from radbuilder.project import Project
from radbuilder.widget import DockArea, Widget, WidgetKind, escape

_HEADER = (
    "// --- generated by egui RAD GUI Builder ---\n"
    "use eframe::egui;\n"
    "use egui_extras::DatePickerButton;\n"
    "use chrono::NaiveDate;\n\n"
)

_TREE_HELPERS = (
    "#[derive(Clone)]\n"
    "struct GenTreeNode { label: String, children: Vec<GenTreeNode> }\n"
    "\n"
    "fn gen_show_tree(ui: &mut egui::Ui, nodes: &[GenTreeNode]) {\n"
    "\tfor n in nodes {\n"
    "\t\tif n.children.is_empty() { ui.label(&n.label); }\n"
    "\t\telse { ui.collapsing(&n.label, |ui| gen_show_tree(ui, &n.children)); }\n"
    "\t}\n"
    "}\n\n"
)

_APP = (
    "pub struct GeneratedApp { state: GeneratedState }\n"
    "impl Default for GeneratedApp { fn default() -> Self "
    "{ Self { state: Default::default() } } }\n"
    "impl eframe::App for GeneratedApp {\n"
    "\tfn update(&mut self, ctx: &egui::Context, _frame: &mut eframe::Frame) {\n"
    "\t\tgenerated_ui(ctx, &mut self.state);\n"
    "\t}\n"
    "}\n\n"
    "fn main() -> eframe::Result<()> {\n"
    "\tlet native_options = eframe::NativeOptions::default();\n"
    '\teframe::run_native("Generated UI", native_options, '
    "Box::new(|_cc| Ok(Box::new(GeneratedApp::default()))))\n"
    "}\n"
)

# Source literal for each boolean value.
_BOOL_LITERAL = {True: "true", False: "false"}

# Name prefix and type of the state field each stateful kind keeps.
_STATE_FIELDS: dict[WidgetKind, tuple[str, str]] = {
    WidgetKind.TextEdit: ("text", "String"),
    WidgetKind.Checkbox: ("checked", "bool"),
    WidgetKind.Slider: ("value", "f32"),
    WidgetKind.ProgressBar: ("progress", "f32"),
    WidgetKind.SelectableLabel: ("sel", "bool"),
    WidgetKind.RadioGroup: ("sel", "usize"),
    WidgetKind.ComboBox: ("sel", "usize"),
    WidgetKind.MenuButton: ("sel", "usize"),
    WidgetKind.CollapsingHeader: ("open", "bool"),
    WidgetKind.DatePicker: ("date", "NaiveDate"),
    WidgetKind.Password: ("pass", "String"),
    WidgetKind.AngleSelector: ("angle", "f32"),
}

# Side panels in emission order: area, enable flag, panel constructor.
_SIDE_PANELS = (
    (DockArea.TOP, "enable_top", 'egui::TopBottomPanel::top("gen_top")'),
    (DockArea.BOTTOM, "enable_bottom", 'egui::TopBottomPanel::bottom("gen_bottom")'),
    (DockArea.LEFT, "enable_left", 'egui::SidePanel::left("gen_left")'),
    (DockArea.RIGHT, "enable_right", 'egui::SidePanel::right("gen_right")'),
)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _initial_value(widget: Widget) -> str:
    props = widget.props
    kind = widget.kind
    if kind in (WidgetKind.TextEdit, WidgetKind.Password):
        return f'"{escape(props.text)}".to_owned()'
    if kind in (
        WidgetKind.Checkbox,
        WidgetKind.SelectableLabel,
        WidgetKind.CollapsingHeader,
    ):
        return _BOOL_LITERAL[bool(props.checked)]
    if kind in (WidgetKind.Slider, WidgetKind.AngleSelector):
        return f"{props.value:.3f}"
    if kind is WidgetKind.ProgressBar:
        return f"{_clamp(props.value, 0.0, 1.0):.3f}"
    if kind in (WidgetKind.RadioGroup, WidgetKind.ComboBox, WidgetKind.MenuButton):
        selected = min(props.selected, len(props.items) - 1) if props.items else 0
        return str(selected)
    if kind is WidgetKind.DatePicker:
        month = _clamp(props.month, 1, 12)
        day = _clamp(props.day, 1, 28)
        return f"NaiveDate::from_ymd_opt({props.year}, {month}, {day}).unwrap()"
    raise KeyError(kind)


def _state_struct(widgets: list[Widget]) -> Iterator[str]:
    yield "struct GeneratedState {\n"
    yield (
        "    enable_top: bool, enable_bottom: bool, "
        "enable_left: bool, enable_right: bool,\n"
    )
    for widget in widgets:
        spec = _STATE_FIELDS.get(widget.kind)
        if spec is not None:
            prefix, type_name = spec
            yield f"    {prefix}_{widget.id}: {type_name},\n"
    yield "}\n\n"


def _state_default(project: Project) -> Iterator[str]:
    top = _BOOL_LITERAL[bool(project.panel_top_enabled)]
    bottom = _BOOL_LITERAL[bool(project.panel_bottom_enabled)]
    left = _BOOL_LITERAL[bool(project.panel_left_enabled)]
    right = _BOOL_LITERAL[bool(project.panel_right_enabled)]
    yield "impl Default for GeneratedState {\n"
    yield "    fn default() -> Self {\n"
    yield "        Self {\n"
    yield (
        f"            enable_top: {top}, "
        f"enable_bottom: {bottom}, "
        f"enable_left: {left}, "
        f"enable_right: {right},\n"
    )
    for widget in project.widgets:
        spec = _STATE_FIELDS.get(widget.kind)
        if spec is not None:
            yield f"            {spec[0]}_{widget.id}: {_initial_value(widget)},\n"
    yield "        }\n"
    yield "    }\n"
    yield "}\n\n"


def _ui_function(project: Project) -> Iterator[str]:
    groups: dict[DockArea, list[Widget]] = {area: [] for area in DockArea}
    for widget in project.widgets:
        groups[widget.area].append(widget)

    yield "fn generated_ui(ctx: &egui::Context, state: &mut GeneratedState) {\n"
    for area, flag, constructor in _SIDE_PANELS:
        yield f"    if state.{flag} {{\n"
        yield f"        {constructor}\n"
        yield "            .resizable(true)\n"
        yield "            .show(ctx, |ui| {\n"
        for widget in groups[area]:
            yield emit_widget(widget, "ui.min_rect().min")
        yield "            });\n"
        yield "    }\n"

    canvas = project.canvas_size
    yield "    egui::CentralPanel::default().show(ctx, |ui| {\n"
    yield (
        "        let canvas = egui::Rect::from_min_size(ui.min_rect().min, "
        f"egui::vec2({canvas.x:.1f}, {canvas.y:.1f}));\n"
    )
    yield "        let _ = ui.allocate_painter(canvas.size(), egui::Sense::hover());\n"
    for widget in groups[DockArea.CENTER] + groups[DockArea.FREE]:
        yield emit_widget(widget, "canvas.min")
    yield "    });\n"
    yield "}\n\n"


def generate_code(project: Project) -> str:
    """Complete application source reproducing the designed layout."""
    parts = [_HEADER]
    if any(w.kind is WidgetKind.Tree for w in project.widgets):
        parts.append(_TREE_HELPERS)
    parts.extend(_state_struct(project.widgets))
    parts.extend(_state_default(project))
    parts.extend(_ui_function(project))
    parts.append(_APP)
    return "".join(parts)