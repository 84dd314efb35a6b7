"""Tests for grid/matrix.py - lazy matrix views."""

import pytest

from statewalk.grid import Grid, HorizontallyFlipped, Rotated, Sliced, VerticallyFlipped


@pytest.fixture
def square():
    return Grid([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def wide():
    return Grid([[1, 2, 3], [4, 5, 6]])


class TestGrid:
    """Test the list-backed matrix."""

    def test_get(self, square):
        assert square.get(0, 0) == 1
        assert square.get(1, 0) == 4
        assert square.get(2, 1) == 8

    def test_shape(self, wide):
        assert (wide.rows, wide.cols) == (2, 3)

    def test_out_of_bounds(self, square):
        with pytest.raises(IndexError):
            square.get(3, 0)
        with pytest.raises(IndexError):
            square.get(0, -1)

    def test_iter_by_rows(self, square):
        assert list(square.iter_by_rows()) == list(range(1, 10))

    def test_iterator_stays_exhausted(self, square):
        it = square.iter_by_rows()
        assert len(list(it)) == 9
        assert next(it, None) is None


class TestViews:
    """Test flip, rotate and slice views."""

    def test_vertical_flip(self, square):
        v = VerticallyFlipped(square)
        assert (v.get(0, 0), v.get(1, 0), v.get(2, 1)) == (7, 4, 2)

    def test_horizontal_flip(self, square):
        h = HorizontallyFlipped(square)
        assert (h.get(0, 0), h.get(1, 0), h.get(2, 1)) == (3, 6, 8)

    def test_rotate_square(self, square):
        r = Rotated(square)
        assert (r.get(0, 0), r.get(1, 0), r.get(2, 1)) == (3, 2, 4)

    def test_rotate_rectangular(self, wide):
        assert wide.rotate().to_lists() == [[3, 6], [2, 5], [1, 4]]

    def test_four_rotations_are_identity(self, wide):
        assert wide.rotate().rotate().rotate().rotate().to_lists() == wide.to_lists()

    def test_slice(self, square):
        s = Sliced(square, range(1, 3), range(1, 3))
        assert (s.get(0, 0), s.get(1, 0), s.get(1, 1)) == (5, 8, 9)
        assert (s.rows, s.cols) == (2, 2)

    def test_slice_outside_window(self, square):
        with pytest.raises(IndexError):
            square.slice(range(0, 1), range(0, 1)).get(1, 0)

    def test_views_compose(self, square):
        view = square.flip_vertically().flip_horizontally()
        assert view.to_lists() == [[9, 8, 7], [6, 5, 4], [3, 2, 1]]

    def test_views_do_not_copy(self):
        data = [[1, 2], [3, 4]]
        view = Grid(data).flip_horizontally()
        data[0][0] = 10
        assert view.get(0, 1) == 10
