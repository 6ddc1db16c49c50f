import math

import pytest

from dotplot import EmptyGraphError, Figure
from dotplot.canvas import Axes, Marker, marker_svg, subplot_grid
from dotplot.canvas.svg import format_float
from dotplot.colors import DEFAULT_CYCLE, RED, Palette


def unit_axes():
    axes = Axes()
    axes.set_xlim(0.0, 1.0)
    axes.set_ylim(0.0, 1.0)
    return axes


def test_to_pixel_adds_margin_and_flips_y():
    axes = unit_axes()

    assert axes.to_pixel(0.0, 0.0) == pytest.approx((60.0, 540.0))
    assert axes.to_pixel(1.0, 1.0) == pytest.approx((740.0, 60.0))


def test_limits_default_to_data_range():
    axes = Axes()
    axes.plot([0.0, 2.0], [1.0, 3.0])

    assert axes.data_ranges() == ((0.0, 2.0), (1.0, 3.0))


def test_palette_is_indexed_by_series_count():
    axes = Axes()

    first = axes.plot([0, 1], [0, 1])
    explicit = axes.scatter([0], [0], color=RED)
    third = axes.plot([0, 1], [1, 0])

    assert first.color == DEFAULT_CYCLE[0]
    assert explicit.color == RED
    assert third.color == DEFAULT_CYCLE[2]


def test_custom_palette_wraps_around():
    axes = Axes(palette=Palette([RED]))

    axes.plot([0, 1], [0, 1])
    second = axes.plot([0, 1], [0, 1])

    assert second.color == RED


def test_series_lengths_must_match():
    with pytest.raises(ValueError):
        Axes().plot([0, 1, 2], [0, 1])


def test_draw_order_is_preserved():
    axes = unit_axes()
    axes.plot([0, 1], [0, 1])
    axes.add_svg_element('<polygon id="raw" points="0,0 1,1 1,0"/>')
    axes.scatter([0.5], [0.5], label='point')

    svg = axes.to_svg()

    assert svg.index('<polyline') < svg.index('id="raw"') < svg.index('<circle')
    assert '<title>point</title>' in svg
    assert axes.fragments == ['<polygon id="raw" points="0,0 1,1 1,0"/>']


def test_ellipse_marker_is_wider_than_tall():
    svg = marker_svg(Marker.ELLIPSE, 100.0, 50.0, 15.0, 'rgb(0,0,0)')

    assert 'rx="27"' in svg
    assert 'ry="18"' in svg


def test_format_float():
    assert format_float(1.23456) == '1.235'
    assert format_float(2.0) == '2'
    assert format_float(-0.0001) == '0'
    with pytest.raises(ValueError):
        format_float(math.nan)


@pytest.mark.parametrize('count, grid', [(0, (0, 0)), (1, (1, 1)), (2, (1, 2)), (3, (2, 2))])
def test_subplot_grid(count, grid):
    assert subplot_grid(count) == grid


def test_figure_scales_multiple_subplots():
    fig = Figure()
    fig.add_subplot().plot([0, 1], [0, 1])
    fig.add_subplot().plot([0, 1], [1, 0])

    svg = fig.to_svg()

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
    assert 'scale(0.5,1)' in svg
    assert 'translate(400,0)' in svg
    assert svg.rstrip().endswith('</svg>')


def test_add_dot_subplot_renders_graph():
    fig = Figure()

    axes = fig.add_dot_subplot('digraph G { a -> b; b -> c; }')

    assert fig.subplots == [axes]
    assert axes.title == 'G'
    assert [s.kind for s in axes.series] == ['line', 'line', 'scatter', 'scatter', 'scatter']


def test_failed_parse_adds_no_subplot():
    fig = Figure()

    with pytest.raises(EmptyGraphError):
        fig.add_dot_subplot('digraph G {}')

    assert fig.subplots == []


def test_save_svg_writes_file(tmp_path):
    fig = Figure()
    fig.add_dot_subplot('digraph { a -> b; }')

    path = fig.save_svg(tmp_path / 'graph.svg')

    text = path.read_text(encoding='utf-8')
    assert text.startswith('<svg')
    assert '<title>a</title>' in text


@pytest.mark.parametrize('marker', [m for m in Marker if m is not Marker.NONE])
def test_every_marker_has_a_glyph(marker):
    svg = marker_svg(marker, 10.0, 10.0, 8.0, 'rgb(1,2,3)')

    assert svg.startswith('<')
    assert 'rgb(1,2,3)' in svg


def test_none_marker_draws_nothing():
    assert marker_svg(Marker.NONE, 0.0, 0.0, 8.0, 'black') == ''
