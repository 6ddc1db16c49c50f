import pytest

from dotplot.colors import (
    BLACK,
    BLUE,
    GRAY,
    LIGHTGRAY,
    RED,
    Color,
    Palette,
    color_from_name,
    color_name,
    parse_color,
    subgraph_border_color,
    svg_paint,
)


@pytest.mark.parametrize(
    'text, color',
    [('red', RED), ('Blue', BLUE), ('"lightgray"', GRAY), ('lightgrey', GRAY), ('pink', BLACK), (None, BLACK)],
)
def test_graph_language_colours(text, color):
    assert parse_color(text) == color


def test_chart_colours_accept_hex():
    assert color_from_name('#ff8000') == Color(255, 128, 0)
    assert color_from_name('lightgrey') == LIGHTGRAY
    assert color_from_name('#zzzzzz') == BLACK


def test_reverse_lookup():
    assert color_name(RED) == 'red'
    assert color_name(GRAY) == 'lightgrey'
    assert color_name(Color(1, 2, 3)) is None


def test_subgraph_border_colours():
    assert subgraph_border_color('lightgrey') == GRAY
    assert subgraph_border_color('blue') == BLUE
    assert subgraph_border_color('red') == BLACK
    assert subgraph_border_color(None) == BLACK


def test_svg_colour_strings():
    assert RED.to_svg() == 'rgb(255,0,0)'
    assert Color(0, 0, 0, 0.5).to_svg() == 'rgba(0,0,0,0.5)'


def test_palette_cycles():
    palette = Palette([RED, BLUE])

    assert len(palette) == 2
    assert [palette.color_for(i) for i in range(3)] == [RED, BLUE, RED]
    with pytest.raises(ValueError):
        Palette([])


@pytest.mark.parametrize(
    'text, paint',
    [
        ('lightblue', 'lightblue'),
        ('"YellowGreen"', 'yellowgreen'),
        ('lightgrey', 'rgb(211,211,211)'),
        ('#ff0000', 'rgb(255,0,0)'),
        ('not a colour', 'rgb(0,0,0)'),
    ],
)
def test_svg_paint_passes_unknown_keywords_through(text, paint):
    assert svg_paint(text) == paint
