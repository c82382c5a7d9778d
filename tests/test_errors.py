import pytest

from tuit.errors import (
    GenericDrawError,
    GenericUpdateError,
    IoError,
    OutOfBoundsCoordinate,
    OutOfBoundsIndex,
    RenderError,
    RequestRescale,
    RescaleRefused,
    TodoError,
    TuitError,
    oob,
    oob_with,
    oobi,
    rescale,
    rescale_to,
)


class _Box:
    def __init__(self, width, height):
        self._width = width
        self._height = height

    def width(self):
        return self._width

    def height(self):
        return self._height


def test_fixed_messages():
    assert str(IoError()) == "Encountered an I/O error."
    assert str(RenderError()) == "Failed to render terminal screen."
    assert str(TodoError()) == "This area has not been implemented!"


def test_oob_has_no_coordinates():
    error = oob()
    assert (error.x, error.y) == (None, None)
    assert "x: None" in str(error)


def test_oob_with_keeps_coordinates():
    error = oob_with((3, 7))
    assert (error.x, error.y) == (3, 7)
    assert "(x: 3, y: 7)" in str(error)


def test_oobi_keeps_index():
    error = oobi(42)
    assert error.index == 42
    assert str(error) == "Attempted to access a character that was out of bounds at index 42"


def test_rescale_from_size():
    error = rescale((30, 12))
    assert (error.new_width, error.new_height) == (30, 12)
    assert "width of 30 and a height of 12" in str(error)


def test_rescale_to_uses_rectangle_dimensions():
    error = rescale_to(_Box(8, 5))
    assert (error.new_width, error.new_height) == (8, 5)


@pytest.mark.parametrize("cls", [GenericDrawError, GenericUpdateError])
def test_generic_errors_wrap_source(cls):
    source = ValueError("boom")
    error = cls(source)
    assert str(error) == "boom"
    assert error.source is source
    assert error.__cause__ is source


def test_rescale_refused_carries_hint():
    error = RescaleRefused(20, 10)
    assert error.hint == (20, 10)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: IoError(),
        lambda: RenderError(),
        lambda: OutOfBoundsIndex(1),
        lambda: OutOfBoundsCoordinate(1, 2),
        lambda: RequestRescale(1, 2),
        lambda: GenericDrawError(RuntimeError("x")),
        lambda: GenericUpdateError(RuntimeError("x")),
        lambda: TodoError(),
        lambda: RescaleRefused(1, 1),
    ],
)
def test_every_error_is_caught_as_tuit_error(factory):
    error = factory()
    with pytest.raises(TuitError) as info:
        raise error
    assert info.value is error