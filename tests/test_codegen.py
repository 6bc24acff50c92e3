from radbuilder.codegen import generate_code
from radbuilder.emit import emit_widget
from radbuilder.palette import default_props, default_size
from radbuilder.project import Project
from radbuilder.widget import DockArea, Vec2, Widget, WidgetKind


def make(kind, wid, area=DockArea.FREE, **props):
    p = default_props(kind)
    for key, value in props.items():
        setattr(p, key, value)
    return Widget(
        id=wid,
        kind=kind,
        pos=Vec2(10.0, 20.0),
        size=default_size(kind),
        z=wid,
        area=area,
        props=p,
    )


def test_empty_project_structure():
    code = generate_code(Project())
    assert code.startswith("// --- generated by egui RAD GUI Builder ---\n")
    assert "use chrono::NaiveDate;\n\n" in code
    assert "GenTreeNode" not in code
    assert (
        "            enable_top: false, enable_bottom: false, "
        "enable_left: false, enable_right: false,\n" in code
    )
    assert "egui::vec2(700.0, 600.0)" in code
    assert code.endswith("}\n")
    assert code.count("egui::TopBottomPanel::") == 2
    assert code.count("egui::SidePanel::") == 2


def test_panel_flags_reflected():
    project = Project(panel_top_enabled=True, panel_right_enabled=True)
    code = generate_code(project)
    assert (
        "enable_top: true, enable_bottom: false, "
        "enable_left: false, enable_right: true,\n" in code
    )


def test_tree_helpers_only_with_tree():
    without = generate_code(Project(widgets=[make(WidgetKind.Label, 1)]))
    with_tree = generate_code(Project(widgets=[make(WidgetKind.Tree, 1)]))
    assert "fn gen_show_tree" not in without
    assert "fn gen_show_tree" in with_tree
    assert with_tree.count("struct GenTreeNode") == 1


def test_state_fields_and_defaults():
    widgets = [
        make(WidgetKind.Checkbox, 3, checked=True),
        make(WidgetKind.TextEdit, 4, text='say "hi"'),
        make(WidgetKind.Label, 5),
    ]
    code = generate_code(Project(widgets=widgets))
    assert "    checked_3: bool,\n" in code
    assert "            checked_3: true,\n" in code
    assert "    text_4: String,\n" in code
    assert '            text_4: "say \\"hi\\"".to_owned(),\n' in code
    assert "_5:" not in code


def test_slider_value_three_decimals():
    code = generate_code(Project(widgets=[make(WidgetKind.Slider, 1)]))
    assert "            value_1: 42.000,\n" in code
    assert "    value_1: f32,\n" in code


def test_widgets_emitted_with_area_origin():
    top = make(WidgetKind.Button, 1, area=DockArea.TOP)
    center = make(WidgetKind.Label, 2, area=DockArea.CENTER)
    code = generate_code(Project(widgets=[top, center]))
    assert emit_widget(top, "ui.min_rect().min") in code
    assert emit_widget(center, "canvas.min") in code


def test_center_before_free():
    free = make(WidgetKind.Label, 1, area=DockArea.FREE, text="free one")
    center = make(WidgetKind.Label, 2, area=DockArea.CENTER, text="center one")
    code = generate_code(Project(widgets=[free, center]))
    assert code.index(emit_widget(center, "canvas.min")) < code.index(
        emit_widget(free, "canvas.min")
    )


def test_date_clamped_like_valid_date():
    wild = make(WidgetKind.DatePicker, 1, month=13, day=31)
    tame = make(WidgetKind.DatePicker, 1, month=12, day=28)
    assert generate_code(Project(widgets=[wild])) == generate_code(
        Project(widgets=[tame])
    )


def test_progress_clamped():
    over = make(WidgetKind.ProgressBar, 1, value=1.5)
    full = make(WidgetKind.ProgressBar, 1, value=1.0)
    assert generate_code(Project(widgets=[over])) == generate_code(
        Project(widgets=[full])
    )


def test_selection_clamped_to_items():
    far = make(WidgetKind.RadioGroup, 1, selected=10)
    last = make(WidgetKind.RadioGroup, 1, selected=2)
    assert generate_code(Project(widgets=[far])) == generate_code(
        Project(widgets=[last])
    )


def test_empty_items_select_zero():
    a = make(WidgetKind.ComboBox, 1, items=[], selected=5)
    b = make(WidgetKind.ComboBox, 1, items=[], selected=0)
    assert generate_code(Project(widgets=[a])) == generate_code(Project(widgets=[b]))


def test_deterministic():
    project = Project(widgets=[make(k, i + 1) for i, k in enumerate(WidgetKind)])
    assert generate_code(project) == generate_code(project)
    code = generate_code(project)
    for widget in project.widgets:
        assert emit_widget(widget, "canvas.min") in code