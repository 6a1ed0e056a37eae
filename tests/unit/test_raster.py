import numpy as np
import pytest

from pixel_pattern.errors import InvalidDimensionError
from pixel_pattern.renderer.raster import to_raster, to_rgba_array
from tests.test_utils import matrix_from_rows


def test_to_raster_byte_layout() -> None:
    matrix = matrix_from_rows(
        [
            [(1, 2, 3), (4, 5, 6)],
            [(7, 8, 9), (10, 11, 12)],
        ]
    )
    assert to_raster(matrix) == bytes(
        [1, 2, 3, 255, 4, 5, 6, 255, 7, 8, 9, 255, 10, 11, 12, 255]
    )


def test_to_rgba_array_is_opaque_copy() -> None:
    matrix = np.full((3, 5, 3), 42, dtype=np.uint8)
    rgba = to_rgba_array(matrix)
    assert rgba.shape == (3, 5, 4)
    assert rgba.dtype == np.uint8
    assert (rgba[..., 3] == 255).all()
    assert np.array_equal(rgba[..., :3], matrix)

    rgba[0, 0, 0] = 0
    assert matrix[0, 0, 0] == 42


def test_raster_length() -> None:
    matrix = np.zeros((7, 11, 3), dtype=np.uint8)
    assert len(to_raster(matrix)) == 7 * 11 * 4


@pytest.mark.parametrize("shape", [(4, 4), (4, 4, 4), (2, 2, 2, 3)])
def test_rejects_inconsistent_matrix(shape: tuple[int, ...]) -> None:
    with pytest.raises(InvalidDimensionError):
        to_raster(np.zeros(shape, dtype=np.uint8))
