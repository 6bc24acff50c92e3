import pytest

from radbuilder.editor import Editor, Rect
from radbuilder.palette import default_props, default_size
from radbuilder.project import Project
from radbuilder.widget import DockArea, Vec2, WidgetKind


def _editor_with_panels() -> Editor:
    editor = Editor()
    editor.set_panel_rect(DockArea.TOP, Rect(Vec2(0, 0), Vec2(1000, 50)))
    editor.set_panel_rect(DockArea.LEFT, Rect(Vec2(0, 50), Vec2(200, 700)))
    editor.set_panel_rect(DockArea.CENTER, Rect(Vec2(200, 50), Vec2(900, 650)))
    return editor


def test_rect_from_min_size_and_contains():
    rect = Rect.from_min_size(Vec2(10, 20), Vec2(30, 40))
    assert rect.min == Vec2(10, 20)
    assert rect.max == Vec2(40, 60)
    assert rect.contains(Vec2(10, 20))
    assert rect.contains(Vec2(40, 60))
    assert not rect.contains(Vec2(41, 30))
    assert not rect.contains(Vec2(20, 19))


def test_defaults():
    editor = Editor()
    assert editor.selected is None
    assert editor.next_id == 1
    assert editor.grid_size == 1.0
    assert editor.palette_open is True
    assert editor.show_grid is False
    assert editor.project == Project()


def test_area_at_hits_panels_and_falls_back_to_free():
    editor = _editor_with_panels()
    assert editor.area_at(Vec2(500, 10)) is DockArea.TOP
    assert editor.area_at(Vec2(100, 300)) is DockArea.LEFT
    assert editor.area_at(Vec2(500, 300)) is DockArea.CENTER
    assert editor.area_at(Vec2(5000, 5000)) is DockArea.FREE


def test_area_at_prefers_top_over_overlapping_center():
    editor = Editor()
    editor.set_panel_rect(DockArea.CENTER, Rect(Vec2(0, 0), Vec2(100, 100)))
    editor.set_panel_rect(DockArea.TOP, Rect(Vec2(0, 0), Vec2(100, 20)))
    assert editor.area_at(Vec2(50, 10)) is DockArea.TOP


def test_origin_for_area_free_uses_center():
    editor = _editor_with_panels()
    assert editor.origin_for_area(DockArea.FREE) == Vec2(200, 50)
    assert editor.origin_for_area(DockArea.LEFT) == Vec2(0, 50)
    assert editor.origin_for_area(DockArea.RIGHT) is None


def test_set_panel_rect_none_hides_panel():
    editor = _editor_with_panels()
    editor.set_panel_rect(DockArea.TOP, None)
    assert editor.origin_for_area(DockArea.TOP) is None
    assert editor.area_at(Vec2(500, 10)) is DockArea.FREE


def test_set_panel_rect_rejects_free():
    with pytest.raises(ValueError):
        Editor().set_panel_rect(DockArea.FREE, Rect(Vec2(0, 0), Vec2(1, 1)))


def test_snap_pos_uses_grid():
    editor = Editor(grid_size=10.0)
    assert editor.snap_pos(Vec2(14, 15)) == Vec2(10, 20)


def test_spawn_widget_centres_and_selects():
    editor = Editor()
    at = Vec2(300, 200)
    origin = Vec2(100, 100)
    widget = editor.spawn_widget(WidgetKind.Button, at, DockArea.CENTER, origin)
    size = default_size(WidgetKind.Button)
    assert widget.pos + origin + size * 0.5 == at
    assert widget.size == size
    assert widget.props == default_props(WidgetKind.Button)
    assert widget.id == 1
    assert widget.z == widget.id
    assert editor.selected == widget.id
    assert editor.next_id == 2
    assert editor.project.widgets == [widget]


def test_spawn_widget_snaps_to_grid():
    editor = Editor(grid_size=8.0)
    widget = editor.spawn_widget(
        WidgetKind.Label, Vec2(123, 77), DockArea.FREE, Vec2(0, 0)
    )
    assert widget.pos.x % 8 == 0
    assert widget.pos.y % 8 == 0


def test_drop_places_in_area_under_pointer():
    editor = _editor_with_panels()
    editor.spawning = WidgetKind.Checkbox
    widget = editor.drop(WidgetKind.Checkbox, Vec2(100, 300))
    assert widget is not None
    assert widget.area is DockArea.LEFT
    assert editor.spawning is None


def test_drop_outside_panels_becomes_free_in_center():
    editor = _editor_with_panels()
    widget = editor.drop(WidgetKind.Label, Vec2(5000, 5000))
    assert widget is not None
    assert widget.area is DockArea.FREE
    size = default_size(WidgetKind.Label)
    assert widget.pos + Vec2(200, 50) + size * 0.5 == Vec2(5000, 5000)


def test_drop_without_center_places_nothing():
    editor = Editor()
    editor.spawning = WidgetKind.Button
    assert editor.drop(WidgetKind.Button, Vec2(10, 10)) is None
    assert editor.project.widgets == []
    assert editor.spawning is None


def test_selected_widget_and_select():
    editor = Editor()
    first = editor.spawn_widget(WidgetKind.Label, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    second = editor.spawn_widget(WidgetKind.Button, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    assert editor.selected_widget() is second
    editor.select(first.id)
    assert editor.selected_widget() is first
    editor.select(None)
    assert editor.selected_widget() is None


def test_move_widget_clamps_inside_canvas():
    editor = Editor()
    widget = editor.spawn_widget(WidgetKind.Button, Vec2(500, 500), DockArea.CENTER, Vec2(0, 0))
    canvas = Rect(Vec2(0, 0), Vec2(700, 600))
    editor.move_widget(widget.id, Vec2(-10000, -10000), canvas)
    assert widget.pos == Vec2(0, 0)
    editor.move_widget(widget.id, Vec2(10000, 10000), canvas)
    assert widget.pos == Vec2(700 - widget.size.x, 600 - widget.size.y)


def test_move_widget_snaps():
    editor = Editor(grid_size=10.0)
    widget = editor.spawn_widget(WidgetKind.Label, Vec2(200, 200), DockArea.CENTER, Vec2(0, 0))
    editor.move_widget(widget.id, Vec2(3, 7), Rect(Vec2(0, 0), Vec2(700, 600)))
    assert widget.pos.x % 10 == 0
    assert widget.pos.y % 10 == 0


def test_move_unknown_widget_raises():
    with pytest.raises(KeyError):
        Editor().move_widget(99, Vec2(1, 1), Rect(Vec2(0, 0), Vec2(10, 10)))


def test_resize_widget_limits():
    editor = Editor()
    widget = editor.spawn_widget(WidgetKind.Button, Vec2(100, 100), DockArea.CENTER, Vec2(0, 0))
    canvas = Rect(Vec2(0, 0), Vec2(700, 600))
    editor.resize_widget(widget.id, Vec2(-10000, -10000), canvas)
    assert widget.size == Vec2(20, 16)
    editor.resize_widget(widget.id, Vec2(10000, 10000), canvas)
    assert widget.size == Vec2(700, 600)


def test_set_items_splits_lines_and_clamps_selection():
    editor = Editor()
    widget = editor.spawn_widget(WidgetKind.ComboBox, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    widget.props.selected = 2
    editor.set_items(widget.id, "one\r\ntwo\n")
    assert widget.props.items == ["one", "two"]
    assert widget.props.selected == 1
    editor.set_items(widget.id, "")
    assert widget.props.items == []
    assert widget.props.selected == 0


def test_set_area_changes_and_snaps():
    editor = Editor()
    widget = editor.spawn_widget(WidgetKind.Label, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    widget.pos = Vec2(13, 27)
    editor.grid_size = 10.0
    editor.set_area(widget.id, DockArea.TOP)
    assert widget.area is DockArea.TOP
    assert widget.pos == Vec2(10, 30)


def test_set_area_same_area_keeps_position():
    editor = Editor()
    widget = editor.spawn_widget(WidgetKind.Label, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    widget.pos = Vec2(13, 27)
    editor.grid_size = 10.0
    editor.set_area(widget.id, DockArea.FREE)
    assert widget.pos == Vec2(13, 27)


def test_delete_selected():
    editor = Editor()
    keep = editor.spawn_widget(WidgetKind.Label, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    gone = editor.spawn_widget(WidgetKind.Button, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    assert editor.delete_selected() is gone
    assert editor.project.widgets == [keep]
    assert editor.selected is None
    assert editor.delete_selected() is None
    assert editor.project.widgets == [keep]


def test_export_import_round_trip():
    editor = _editor_with_panels()
    editor.drop(WidgetKind.Tree, Vec2(500, 300))
    editor.drop(WidgetKind.Slider, Vec2(100, 300))
    editor.project.panel_left_enabled = True
    original = editor.project
    text = editor.export_json()
    assert editor.generated == text
    editor.clear_project()
    assert editor.project == Project()
    editor.generated = text
    assert editor.import_json() == original
    assert editor.project == original
    assert editor.selected is None


def test_import_invalid_json_keeps_project():
    editor = Editor()
    widget = editor.spawn_widget(WidgetKind.Label, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    editor.generated = "not json"
    with pytest.raises(ValueError):
        editor.import_json()
    assert editor.project.widgets == [widget]
    assert editor.selected == widget.id


def test_clear_project_resets_selection():
    editor = Editor()
    editor.spawn_widget(WidgetKind.Label, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    editor.clear_project()
    assert editor.project.widgets == []
    assert editor.selected is None


def test_widgets_by_area_keeps_order():
    editor = Editor()
    a = editor.spawn_widget(WidgetKind.Label, Vec2(0, 0), DockArea.TOP, Vec2(0, 0))
    b = editor.spawn_widget(WidgetKind.Button, Vec2(0, 0), DockArea.FREE, Vec2(0, 0))
    c = editor.spawn_widget(WidgetKind.Link, Vec2(0, 0), DockArea.TOP, Vec2(0, 0))
    groups = editor.widgets_by_area()
    assert set(groups) == set(DockArea)
    assert groups[DockArea.TOP] == [a, c]
    assert groups[DockArea.FREE] == [b]
    assert groups[DockArea.RIGHT] == []
    assert sum(len(g) for g in groups.values()) == len(editor.project.widgets)