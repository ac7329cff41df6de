import logging

import pytest

from sketchangle import measure, point
from sketchangle.cad_types import Vertex
from sketchangle.paths import mirror_path
from sketchangle.primitives import Arc, Circle, Line


def test_mirror_line():
    line = Line((1, 2), (3, 4))
    mirrored = mirror_path(line, True, False)
    assert isinstance(mirrored, Line)
    assert mirrored.origin == Vertex(-1, 2)
    assert mirrored.end == Vertex(-3, 4)
    # Original is untouched
    assert line.origin == (1, 2)


def test_mirror_circle():
    mirrored = mirror_path(Circle((2, 5), 3), True, True)
    assert isinstance(mirrored, Circle)
    assert mirrored.origin == Vertex(-2, -5)
    assert mirrored.radius == 3


def test_mirror_arc_x_swaps_ends():
    mirrored = mirror_path(Arc((0, 0), 1, 0, 90), True, False)
    assert mirrored.start_angle == 90
    assert mirrored.end_angle == 180


def test_mirror_arc_y_swaps_ends():
    mirrored = mirror_path(Arc((0, 0), 1, 0, 90), False, True)
    assert mirrored.start_angle == 270
    assert mirrored.end_angle == 360


def test_mirror_arc_both_keeps_order():
    mirrored = mirror_path(Arc((1, 1), 1, 0, 90), True, True)
    assert mirrored.origin == Vertex(-1, -1)
    assert mirrored.start_angle == 180
    assert mirrored.end_angle == 270


@pytest.mark.parametrize(
    "mirror_x, mirror_y", [(True, False), (False, True), (True, True)]
)
def test_mirror_arc_moves_end_points(mirror_x, mirror_y):
    arc = Arc((2, 3), 4, 30, 120)
    mirrored = mirror_path(arc, mirror_x, mirror_y)

    expected = {point.mirror(p, mirror_x, mirror_y) for p in point.from_arc(arc)}
    assert set(point.from_arc(mirrored)) == expected
    assert measure.arc_angle(mirrored) == pytest.approx(measure.arc_angle(arc))


def test_mirror_unsupported_type():
    with pytest.raises(ValueError, match="Cannot mirror path of type str"):
        mirror_path("not a path", True, False)


def test_mirror_logs_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="sketchangle.paths"):
        mirror_path(Line(Vertex(1, 2), Vertex(3, 4)), True, False)
    assert "Mirrored Line(origin=(1.0, 2.0), end=(3.0, 4.0))" in caplog.text
    assert "-> Line(origin=(-1.0, 2.0), end=(-3.0, 4.0))" in caplog.text
    assert "np.float64" not in caplog.text
