import contextlib
import dataclasses

import plotly.graph_objects as go
import pytest

from PanelComposer import (
    Arrangement,
    EmptyInput,
    InvalidLayout,
    NegativeFraction,
    Panel,
    compose,
    side_by_side,
    stack,
)


def _panels(n, **kwargs):
    return [Panel(panel_id=f"p{i + 1}", **kwargs) for i in range(n)]


def _ids(arrangement):
    return [[cell.item.panel_id for cell in row.cells] for row in arrangement.rows]


def test_four_panels_two_rows_equal_shares():
    p1, p2, p3, p4 = _panels(4)
    grid = compose([p1, p2, p3, p4], rows=2)

    assert isinstance(grid, Arrangement)
    assert _ids(grid) == [["p1", "p2"], ["p3", "p4"]]
    assert grid.heights == pytest.approx((0.5, 0.5))
    assert grid.widths == ((0.5, 0.5), (0.5, 0.5))


def test_three_panels_two_rows_with_heights():
    p1, p2, p3 = _panels(3)
    grid = compose([p1, p2, p3], rows=2, heights=[0.2, 0.8])

    assert _ids(grid) == [["p1"], ["p2", "p3"]]
    assert grid.heights == pytest.approx((0.2, 0.8))
    assert grid.widths[0] == pytest.approx((1.0,))
    assert grid.widths[1] == pytest.approx((0.5, 0.5))


def test_empty_input_fails():
    with pytest.raises(EmptyInput):
        compose([], rows=1)


@pytest.mark.parametrize("n_panels,rows", [(1, 1), (4, 2), (6, 3), (6, 2), (9, 3), (8, 4)])
def test_even_split_gives_n_over_r_per_row(n_panels, rows):
    grid = compose(_panels(n_panels), rows=rows)
    assert grid.columns_per_row == tuple([n_panels // rows] * rows)


@pytest.mark.parametrize("n_panels,rows,heights", [
    (5, 2, None),
    (7, 3, [1, 2, 3]),
    (3, 3, [0.1, 0.1, 0.1]),
    (4, 1, None),
    (2, 2, [0.03, 0.97]),
    (30, 30, None),
])
def test_fractions_always_sum_to_one(n_panels, rows, heights):
    with _maybe_warns(heights):
        grid = compose(_panels(n_panels), rows=rows, heights=heights)

    assert sum(grid.heights) == pytest.approx(1.0)
    for row_widths in grid.widths:
        assert sum(row_widths) == pytest.approx(1.0)
    assert sum(grid.columns_per_row) == n_panels


def _maybe_warns(heights):
    if heights is not None and abs(sum(heights) - 1.0) > 1e-9:
        return pytest.warns(UserWarning, match="normalizing")
    return contextlib.nullcontext()


def test_uneven_split_puts_extra_panels_in_bottom_rows():
    grid = compose(_panels(7), rows=3)
    assert grid.columns_per_row == (2, 2, 3)
    assert _ids(grid)[2] == ["p5", "p6", "p7"]


def test_heights_are_normalized_with_warning():
    with pytest.warns(UserWarning, match="normalizing"):
        grid = compose(_panels(2), rows=2, heights=[1, 3])
    assert grid.heights == pytest.approx((0.25, 0.75))


def test_flat_widths_apply_to_every_row():
    grid = compose(_panels(4), rows=2, widths=[0.7, 0.3])
    for row_widths in grid.widths:
        assert row_widths == pytest.approx((0.7, 0.3))


def test_per_row_widths_for_uneven_rows():
    grid = compose(_panels(3), rows=2, widths=[[1.0], [0.25, 0.75]])
    assert grid.widths[1] == pytest.approx((0.25, 0.75))


def test_flat_widths_rejected_when_rows_differ():
    with pytest.raises(InvalidLayout, match="same column count"):
        compose(_panels(3), rows=2, widths=[0.5, 0.5])


@pytest.mark.parametrize("rows", [0, -1, 2.5, True])
def test_invalid_row_count(rows):
    with pytest.raises(InvalidLayout):
        compose(_panels(2), rows=rows)


def test_more_rows_than_panels_fails():
    with pytest.raises(InvalidLayout):
        compose(_panels(2), rows=3)


@pytest.mark.parametrize("kwargs", [
    dict(rows=2, heights=[1.0]),
    dict(rows=2, heights=[0.2, 0.3, 0.5]),
    dict(rows=1, widths=[0.5, 0.5]),
    dict(rows=2, widths=[[0.5, 0.5]]),
])
def test_length_mismatch_is_invalid_layout(kwargs):
    with pytest.raises(InvalidLayout):
        compose(_panels(4), **kwargs)


@pytest.mark.parametrize("kwargs", [
    dict(rows=2, heights=[0.0, 1.0]),
    dict(rows=2, heights=[-0.5, 1.5]),
    dict(rows=1, widths=[0.5, 0.5, -0.2, 0.2]),
    dict(rows=2, heights=[float("nan"), 1.0]),
])
def test_non_positive_fraction(kwargs):
    with pytest.raises(NegativeFraction):
        compose(_panels(4), **kwargs)


def test_negative_fraction_is_an_invalid_layout():
    assert issubclass(NegativeFraction, InvalidLayout)
    assert issubclass(InvalidLayout, ValueError)
    assert issubclass(EmptyInput, ValueError)


def test_negative_margin_fails():
    with pytest.raises(InvalidLayout):
        compose(_panels(2), margin=-0.01)


def test_margin_leaving_no_room_fails():
    with pytest.raises(InvalidLayout, match="no room"):
        compose(_panels(2), rows=1, margin=0.3)


def test_four_sided_margin():
    grid = compose(_panels(1), margin=[0.1, 0.0, 0.05, 0.0])
    assert grid.margin.left == 0.1
    assert grid.margin.top == 0.05


def test_duplicate_ids_fail():
    with pytest.raises(InvalidLayout, match="duplicate"):
        compose([Panel("a"), Panel("a")])


def test_share_x_groups_by_column():
    grid = compose(_panels(6), rows=2, share_x=True)

    for c in range(3):
        groups = {grid.cell(r, c).x_group for r in range(2)}
        assert groups == {f"x{c + 1}"}
    assert all(cell.y_group is None for _, _, cell in grid.iter_cells())
    assert grid.x_groups() == {"x1": ["p1", "p4"], "x2": ["p2", "p5"], "x3": ["p3", "p6"]}


def test_share_y_groups_by_row():
    grid = compose(_panels(4), rows=2, share_y=True)
    assert grid.y_groups() == {"y1": ["p1", "p2"], "y2": ["p3", "p4"]}


def test_panel_can_opt_out_of_sharing():
    p1, p2 = _panels(2)
    loner = Panel("loner", share_x=False)
    grid = compose([p1, p2, loner, Panel("p4")], rows=2, share_x=True)

    assert grid.cell(1, 0).x_group is None
    assert grid.x_groups()["x1"] == ["p1"]


def test_nested_arrangement_keeps_structure():
    inner = compose(_panels(4), rows=2, share_x=True, panel_id="inner")
    before = inner.to_dict()

    outer = compose([inner, Panel("side")], rows=1, widths=[0.7, 0.3])

    assert outer.cell(0, 0).item is inner
    assert outer.cell(0, 0).is_nested
    assert inner.to_dict() == before
    assert outer.columns_per_row == (2,)


def test_merged_cell_layout_rows_with_different_column_counts():
    top = compose([Panel("a"), Panel("b"), Panel("c")], panel_id="top")
    outer = compose([top, Panel("bottom")], rows=2)

    assert outer.columns_per_row == (1, 1)
    assert top.columns_per_row == (3,)
    assert len(outer.leaves()) == 4


def test_compose_does_not_mutate_inputs():
    panels = _panels(3)
    snapshot = list(panels)
    grid = compose(panels, rows=2)

    assert panels == snapshot
    with pytest.raises(dataclasses.FrozenInstanceError):
        grid.share_x = True


def test_raw_figures_are_wrapped():
    fig_a = go.Figure(go.Scatter(x=[1, 2], y=[3, 4]))
    fig_b = go.Figure(go.Bar(x=["a"], y=[1]), layout_title_text="Bars")

    grid = compose([fig_a, fig_b])

    assert [p.panel_id for p in grid.panels] == ["panel1", "panel2"]
    assert grid.panels[1].title == "Bars"
    assert grid.panels[0].content is fig_a


def test_unsupported_raw_object_raises_type_error():
    with pytest.raises(TypeError):
        compose([42])


def test_default_panel_id_lists_members():
    grid = compose(_panels(2))
    assert grid.panel_id == "arrangement(p1,p2)"


def test_stack_and_side_by_side():
    assert stack(*_panels(3)).columns_per_row == (1, 1, 1)
    assert side_by_side(*_panels(3)).columns_per_row == (3,)


@pytest.mark.parametrize("kwargs", [dict(rows=2, heights=0.5), dict(rows=1, widths=1.0)])
def test_scalar_fractions_are_invalid_layout(kwargs):
    with pytest.raises(InvalidLayout, match="sequence"):
        compose(_panels(2), **kwargs)


@pytest.mark.parametrize("kwargs", [
    dict(rows=2, heights=[0.03, 0.97]),
    dict(rows=1, widths=[0.01, 0.99]),
])
def test_default_margin_fits_thin_cells(kwargs):
    grid = compose(_panels(2), **kwargs)

    for row in grid.domains():
        for dom in row:
            assert dom.width > 0
            assert dom.height > 0
    thin = grid.domains()[0][0]
    assert min(thin.width, thin.height) == pytest.approx(0.8 * min(
        grid.widths[0][0], grid.heights[0]))


def test_many_stacked_panels_with_default_margin():
    grid = stack(*_panels(30))

    assert grid.n_rows == 30
    assert grid.margin.fit
    assert all(row[0].height > 0 for row in grid.domains())


def test_explicit_margin_is_not_shrunk():
    with pytest.raises(InvalidLayout, match="no room"):
        compose(_panels(2), rows=2, heights=[0.03, 0.97], margin=0.02)


def test_nesting_grids_of_raw_figures():
    left = compose([go.Figure(go.Scatter(y=[1, 2])), go.Figure(go.Scatter(y=[2, 1]))])
    right = compose([go.Figure(go.Bar(y=[1])), go.Figure(go.Bar(y=[2]))])
    assert left.panel_id == right.panel_id

    page = compose([left, right], rows=2)

    locations = [leaf.location for leaf in page.leaves()]
    assert len(locations) == len(set(locations)) == 4
    assert [p.panel_id for p in page.panels] == [left.panel_id, right.panel_id]


def test_same_arrangement_reused_in_two_cells():
    inner = compose(_panels(2), share_x=True, panel_id="inner")

    page = compose([inner, inner, Panel("side")], rows=2)

    assert page.cell(0, 0).item is inner
    assert page.cell(1, 0).item is inner
    assert [leaf.location for leaf in page.leaves()] == [
        "r1c1/r1c1", "r1c1/r1c2", "r2c1/r1c1", "r2c1/r1c2", "r2c2",
    ]
