import pytest

from tuit.errors import OutOfBoundsCoordinate, RenderError, RescaleRefused
from tuit.rect import Rectangle
from tuit.style import Ansi4, Style
from tuit.terminal import Cell, Rescalable, Terminal
from tuit.view import View


class GridTerminal(Terminal):
    def __init__(self, width, height, style=Style()):
        self._size = (width, height)
        self._style = style
        self._cells = [Cell(" ") for _ in range(width * height)]

    def dimensions(self):
        return self._size

    def default_style(self):
        return self._style

    def cells(self):
        return iter(self._cells)


class GrowingTerminal(GridTerminal, Rescalable):
    LIMIT = (30, 30)

    def rescale(self, new_size):
        width, height = new_size
        if width > self.LIMIT[0] or height > self.LIMIT[1]:
            raise RescaleRefused(min(width, self.LIMIT[0]), min(height, self.LIMIT[1]))
        self._size = (width, height)
        self._cells = [Cell(" ") for _ in range(width * height)]


class RecordingRenderer:
    def __init__(self):
        self.seen = []

    def render(self, terminal):
        self.seen.append(terminal)


class FailingRenderer:
    def render(self, terminal):
        raise RenderError()


def test_cell_defaults_to_empty_style():
    assert Cell("a").style == Style()
    assert Cell("a") == Cell("a", Style())


def test_cell_default_character_is_nul():
    assert Cell().character == "\0"


def test_cell_rejects_multiple_characters():
    with pytest.raises(ValueError):
        Cell("ab")


def test_cell_equality_includes_style():
    assert Cell("a") != Cell("a", Style().fg_ansi4(Ansi4.RED))


def test_metadata_helpers():
    terminal = GridTerminal(7, 3)
    assert terminal.width() == 7
    assert terminal.height() == 3
    assert terminal.bounding_box() == Rectangle.of_size((7, 3))


def test_default_style_is_reported():
    style = Style().bg_ansi4(Ansi4.BLUE)
    assert GridTerminal(2, 2, style).default_style() == style


def test_cell_matches_row_major_order():
    terminal = GridTerminal(4, 3)
    cells = list(terminal.cells())
    area = Rectangle.of_size((4, 3))
    for index, expected in enumerate(cells):
        x, y = area.index_into(index)
        assert Terminal.cell(terminal, x, y) is expected


@pytest.mark.parametrize("point", [(4, 0), (0, 3), (-1, 0), (0, -1), (10, 10)])
def test_cell_out_of_bounds_is_none(point):
    terminal = GridTerminal(4, 3)
    assert Terminal.cell(terminal, *point) is None


def test_cell_mutation_persists():
    terminal = GridTerminal(5, 5)
    Terminal.cell(terminal, 2, 3).character = "z"
    assert list(terminal.cells())[2 + 5 * 3] == Cell("z")


def test_view_returns_view_of_rect():
    terminal = GridTerminal(10, 10)
    rect = Rectangle.of_size((3, 4)).at((2, 2))
    view = terminal.view(rect)
    assert isinstance(view, View)
    assert view.dimensions() == rect.dimensions()


def test_view_outside_raises():
    terminal = GridTerminal(10, 10)
    with pytest.raises(OutOfBoundsCoordinate):
        terminal.view(Rectangle.of_size((5, 5)).at((8, 8)))


def test_display_hands_terminal_to_renderer():
    terminal = GridTerminal(2, 2)
    renderer = RecordingRenderer()
    Terminal.display(terminal, renderer)
    assert renderer.seen == [terminal]


def test_display_propagates_renderer_errors():
    terminal = GridTerminal(2, 2)
    with pytest.raises(RenderError):
        Terminal.display(terminal, FailingRenderer())


def test_terminal_is_abstract():
    with pytest.raises(TypeError):
        Terminal()


def test_rescalable_is_abstract():
    with pytest.raises(TypeError):
        Rescalable()


def test_rescale_within_limit():
    terminal = GrowingTerminal(5, 5)
    terminal.rescale((10, 10))
    assert Terminal.bounding_box(terminal) == Rectangle.of_size((10, 10))
    assert len(list(terminal.cells())) == 10 * 10


def test_rescale_refused_carries_hint():
    terminal = GrowingTerminal(5, 5)
    with pytest.raises(RescaleRefused) as info:
        terminal.rescale((31, 10))
    assert info.value.hint == (30, 10)
    assert Terminal.bounding_box(terminal) == Rectangle.of_size((5, 5))