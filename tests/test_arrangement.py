import pytest

from PanelComposer import Arrangement, InvalidLayout, Panel, compose
from PanelComposer.core.arrangement import Cell, Row
from PanelComposer.core.geometry import Domain


def _panels(*names):
    return [Panel(name) for name in names]


def test_leaves_of_flat_grid():
    grid = compose(_panels("a", "b", "c", "d"), rows=2, margin=0)
    leaves = grid.leaves()

    assert [leaf.panel.panel_id for leaf in leaves] == ["a", "b", "c", "d"]
    assert leaves[0].domain == Domain(0.0, 0.5, 0.5, 1.0)
    assert leaves[3].domain == Domain(0.5, 1.0, 0.0, 0.5)
    assert leaves[3].location == "r2c2"


def test_leaves_of_nested_grid_are_mapped_into_the_cell():
    inner = compose(_panels("a", "b"), rows=1, margin=0, panel_id="inner")
    outer = compose([inner, Panel("c")], rows=2, margin=0)
    leaves = outer.leaves()

    assert [leaf.panel.panel_id for leaf in leaves] == ["a", "b", "c"]
    assert leaves[0].domain == Domain(0.0, 0.5, 0.5, 1.0)
    assert leaves[1].domain == Domain(0.5, 1.0, 0.5, 1.0)
    assert leaves[2].domain == Domain(0.0, 1.0, 0.0, 0.5)
    assert leaves[1].path == ((0, 0), (0, 1))
    assert leaves[1].location == "r1c1/r1c2"


def test_nested_groups_are_qualified_by_location():
    inner = compose(_panels("a", "b", "c", "d"), rows=2, share_x=True, panel_id="inner")
    outer = compose([inner, Panel("e")], rows=1, share_x=True)
    groups = {leaf.panel.panel_id: leaf.x_group for leaf in outer.leaves()}

    assert groups == {
        "a": "r1c1/x1", "b": "r1c1/x2",
        "c": "r1c1/x1", "d": "r1c1/x2",
        "e": "x2",
    }
    assert outer.x_groups() == {"x1": ["inner"], "x2": ["e"]}


def test_nested_leaves_keep_their_own_title_flags():
    inner = compose(_panels("a"), title_x=False, panel_id="inner")
    outer = compose([inner, Panel("b")])
    flags = {leaf.panel.panel_id: leaf.title_x for leaf in outer.leaves()}
    assert flags == {"a": False, "b": True}


def test_arrangement_is_usable_twice():
    inner = compose(_panels("a", "b"), panel_id="inner")
    first = compose([inner, Panel("c")], rows=2)
    second = compose([Panel("d"), inner], rows=1)

    assert first.cell(0, 0).item is second.cell(0, 1).item
    assert inner.columns_per_row == (2,)


def test_cell_lookup_out_of_range():
    grid = compose(_panels("a", "b"))
    with pytest.raises(IndexError, match="no cell"):
        grid.cell(1, 0)


def test_direct_construction_checks_sums():
    cells = (Cell(item=Panel("a"), width=0.4), Cell(item=Panel("b"), width=0.4))
    with pytest.raises(InvalidLayout, match="widths"):
        Arrangement(rows=(Row(cells=cells, height=1.0),))
    with pytest.raises(InvalidLayout, match="heights"):
        Arrangement(rows=(Row(cells=cells[:1], height=0.5),))
    with pytest.raises(InvalidLayout):
        Arrangement(rows=())


def test_dict_round_trip_with_nesting():
    inner = compose(_panels("a", "b", "c"), rows=2, heights=[0.3, 0.7],
                    share_y=True, panel_id="inner")
    outer = compose([inner, Panel("d", title="D", x_title="time")],
                    widths=[0.6, 0.4], margin=[0.01, 0.02, 0.03, 0.04],
                    title_y=False, panel_id="outer")

    restored = Arrangement.from_dict(outer.to_dict())

    assert restored == outer
    assert restored.cell(0, 0).item.heights == pytest.approx((0.3, 0.7))
    assert restored.cell(0, 1).item.x_title == "time"
    assert restored.margin.to_list() == [0.01, 0.02, 0.03, 0.04]
    assert not restored.margin.fit
    assert restored.cell(0, 0).item.margin.fit
    assert restored.title_y is False


def test_callable_content_is_dropped_from_dict():
    grid = compose([Panel("a", content=lambda ax: None)])
    assert grid.to_dict()['rows'][0]['cells'][0]['item']['content'] is None


def test_to_frame_has_one_row_per_leaf():
    inner = compose(_panels("a", "b"), panel_id="inner")
    outer = compose([inner, Panel("c")], rows=2, share_x=True)
    frame = outer.to_frame()

    assert list(frame['panel_id']) == ["a", "b", "c"]
    assert list(frame['depth']) == [1, 1, 0]
    assert frame.loc[2, 'x_group'] == "x1"
    assert (frame['x1'] > frame['x0']).all()
    assert (frame['y1'] > frame['y0']).all()


def test_describe_prints_structure(capsys):
    inner = compose(_panels("a", "b"), panel_id="inner")
    compose([inner, Panel("c")], rows=2, share_x=True, panel_id="page").describe()
    out = capsys.readouterr().out

    assert "✓ Arrangement 'page': 2 rows [1 x 1]" in out
    assert "✓ Arrangement 'inner'" in out
    assert "- c (width 1.000)  [x1]" in out
