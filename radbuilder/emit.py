"""Source snippets that place one widget inside a generated panel."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from radbuilder.tree import TreeNode, parse_nodes
from radbuilder.widget import Widget, WidgetKind, escape

_DEFAULT_TREE_LINES = ("Root", "  Child")


def _f1(value: float) -> str:
    return f"{value:.1f}"


def _f3(value: float) -> str:
    return f"{value:.3f}"


def items_literal(items: Sequence[str]) -> str:
    """Comma-separated string literals for ``items``; a single "Item" when empty."""
    if not items:
        return '"Item".to_string()'
    return ", ".join(f'"{escape(item)}".to_string()' for item in items)


def _node_literal(node: TreeNode) -> str:
    if node.children:
        kids = f"vec![{', '.join(_node_literal(child) for child in node.children)}]"
    else:
        kids = "vec![]"
    return (
        f'GenTreeNode {{ label: "{escape(node.label)}".to_string(), '
        f"children: {kids} }}"
    )


def nodes_to_literal(nodes: Iterable[TreeNode]) -> str:
    """A vector literal of tree nodes, children nested."""
    return f"vec![{', '.join(_node_literal(node) for node in nodes)}]"


def _scope_open(widget: Widget, origin: str) -> str:
    pos, size = widget.pos, widget.size
    return (
        "    ui.scope_builder(egui::UiBuilder::new().max_rect(egui::Rect::from_min_size("
        f"{origin} + egui::vec2({_f1(pos.x)},{_f1(pos.y)}), "
        f"egui::vec2({_f1(size.x)},{_f1(size.y)}))), |ui| {{"
    )


def _sized(widget: Widget) -> str:
    return f"egui::vec2({_f1(widget.size.x)},{_f1(widget.size.y)})"


def _one_line(body: str) -> Callable[[Widget, str], str]:
    def emit(widget: Widget, origin: str) -> str:
        return f"{_scope_open(widget, origin)} {body.format(w=widget)} }});\n"

    return emit


def _text(widget: Widget) -> str:
    return escape(widget.props.text)


def _menu_button(widget: Widget, origin: str) -> str:
    wid = widget.id
    return (
        f"{_scope_open(widget, origin)}\n"
        f"        let items = vec![{items_literal(widget.props.items)}];\n"
        f'        ui.menu_button("{_text(widget)}", |ui| {{\n'
        "            for (i, it) in items.iter().enumerate() { if ui.button(it).clicked() "
        f"{{ state.sel_{wid} = i; ui.close_kind(egui::UiKind::Menu); }} }}\n"
        "        });\n"
        "    });\n"
    )


def _label(widget: Widget, origin: str) -> str:
    return f'{_scope_open(widget, origin)} ui.label("{_text(widget)}"); }});\n'


def _button(widget: Widget, origin: str) -> str:
    return (
        f"{_scope_open(widget, origin)} ui.add_sized({_sized(widget)}, "
        f'egui::Button::new("{_text(widget)}")); }});\n'
    )


def _image_text_button(widget: Widget, origin: str) -> str:
    return (
        f"{_scope_open(widget, origin)} ui.add_sized({_sized(widget)}, "
        f'egui::Button::new(format!("{{}}  {{}}", "{escape(widget.props.icon)}", '
        f'"{_text(widget)}")) ); }});\n'
    )


def _checkbox(widget: Widget, origin: str) -> str:
    return (
        f"{_scope_open(widget, origin)} ui.checkbox(&mut state.checked_{widget.id}, "
        f'"{_text(widget)}"); }});\n'
    )


def _text_edit(widget: Widget, origin: str) -> str:
    return (
        f"{_scope_open(widget, origin)} ui.add_sized({_sized(widget)}, "
        f"egui::TextEdit::singleline(&mut state.text_{widget.id})"
        f'.hint_text("{_text(widget)}")); }});\n'
    )


def _slider(widget: Widget, origin: str) -> str:
    props = widget.props
    return (
        f"{_scope_open(widget, origin)} ui.add_sized({_sized(widget)}, "
        f"egui::Slider::new(&mut state.value_{widget.id}, "
        f'{_f3(props.min)}..={_f3(props.max)}).text("{_text(widget)}")); }});\n'
    )


def _progress_bar(widget: Widget, origin: str) -> str:
    return (
        f"{_scope_open(widget, origin)} ui.add_sized({_sized(widget)}, "
        f"egui::ProgressBar::new(state.progress_{widget.id}).show_percentage()); }});\n"
    )


def _radio_group(widget: Widget, origin: str) -> str:
    wid = widget.id
    return (
        f"{_scope_open(widget, origin)}\n"
        f"        let items = vec![{items_literal(widget.props.items)}];\n"
        "        for (i, it) in items.iter().enumerate() { if ui.add("
        f"egui::RadioButton::new(state.sel_{wid} == i, it)).clicked() "
        f"{{ state.sel_{wid} = i; }} }}\n"
        "    });\n"
    )


def _link(widget: Widget, origin: str) -> str:
    return f'{_scope_open(widget, origin)} ui.link("{_text(widget)}"); }});\n'


def _hyperlink(widget: Widget, origin: str) -> str:
    return (
        f'{_scope_open(widget, origin)} ui.hyperlink_to("{_text(widget)}", '
        f'"{escape(widget.props.url)}"); }});\n'
    )


def _selectable_label(widget: Widget, origin: str) -> str:
    wid = widget.id
    return (
        f"{_scope_open(widget, origin)} if ui.add(egui::Button::selectable("
        f'state.sel_{wid}, "{_text(widget)}")).clicked() '
        f"{{ state.sel_{wid} = !state.sel_{wid}; }} }});\n"
    )


def _combo_box(widget: Widget, origin: str) -> str:
    wid = widget.id
    return (
        f"{_scope_open(widget, origin)}\n"
        f"        let items = vec![{items_literal(widget.props.items)}];\n"
        f"        egui::ComboBox::from_id_source({wid})\n"
        f"            .width({_f1(widget.size.x)})\n"
        f"            .selected_text(items.get(state.sel_{wid}).cloned()"
        '.unwrap_or_else(|| "".to_string()))\n'
        "            .show_ui(ui, |ui| {\n"
        "                for (i, it) in items.iter().enumerate() { "
        f"ui.selectable_value(&mut state.sel_{wid}, i, it.clone()); }}\n"
        "            });\n"
        "    });\n"
    )


def _separator(widget: Widget, origin: str) -> str:
    return f"{_scope_open(widget, origin)} ui.separator(); }});\n"


def _collapsing_header(widget: Widget, origin: str) -> str:
    return (
        f'{_scope_open(widget, origin)} egui::CollapsingHeader::new("{_text(widget)}")'
        f".default_open(state.open_{widget.id}).show(ui, |ui| "
        '{ ui.label("… place your inner content here …"); }); });\n'
    )


def _date_picker(widget: Widget, origin: str) -> str:
    return (
        f'{_scope_open(widget, origin)} ui.horizontal(|ui| {{ ui.label("{_text(widget)}"); '
        f"ui.add(DatePickerButton::new(&mut state.date_{widget.id})); }}); }});\n"
    )


def _password(widget: Widget, origin: str) -> str:
    return (
        f"{_scope_open(widget, origin)} ui.add_sized({_sized(widget)}, "
        f"egui::TextEdit::singleline(&mut state.pass_{widget.id})"
        '.password(true).hint_text("password") ); });\n'
    )


def _angle_selector(widget: Widget, origin: str) -> str:
    props = widget.props
    return (
        f"{_scope_open(widget, origin)} ui.add_sized({_sized(widget)}, "
        f"egui::Slider::new(&mut state.angle_{widget.id}, "
        f'{_f3(props.min)}..={_f3(props.max)}).suffix("°").text("{_text(widget)}") ); }});\n'
    )


def _tree(widget: Widget, origin: str) -> str:
    lines = widget.props.items or list(_DEFAULT_TREE_LINES)
    nodes = nodes_to_literal(parse_nodes(lines))
    return (
        f"{_scope_open(widget, origin)} let nodes: Vec<GenTreeNode> = {nodes}; "
        "egui::ScrollArea::vertical().auto_shrink([false,false]).show(ui, |ui| { "
        "gen_show_tree(ui, &nodes); }); });\n"
    )


_EMITTERS: dict[WidgetKind, Callable[[Widget, str], str]] = {
    WidgetKind.MenuButton: _menu_button,
    WidgetKind.Label: _label,
    WidgetKind.Button: _button,
    WidgetKind.ImageTextButton: _image_text_button,
    WidgetKind.Checkbox: _checkbox,
    WidgetKind.TextEdit: _text_edit,
    WidgetKind.Slider: _slider,
    WidgetKind.ProgressBar: _progress_bar,
    WidgetKind.RadioGroup: _radio_group,
    WidgetKind.Link: _link,
    WidgetKind.Hyperlink: _hyperlink,
    WidgetKind.SelectableLabel: _selectable_label,
    WidgetKind.ComboBox: _combo_box,
    WidgetKind.Separator: _separator,
    WidgetKind.CollapsingHeader: _collapsing_header,
    WidgetKind.DatePicker: _date_picker,
    WidgetKind.AngleSelector: _angle_selector,
    WidgetKind.Password: _password,
    WidgetKind.Tree: _tree,
}


def emit_widget(widget: Widget, origin: str) -> str:
    """Code placing ``widget`` at ``origin`` plus its local position."""
    return _EMITTERS[widget.kind](widget, origin)