import numpy as np
import numpy.typing as npt

from pixel_pattern.types import RGB_CHANNELS

UInt8Array = npt.NDArray[np.uint8]


def is_horizontally_symmetric(arr: UInt8Array, channels: int = RGB_CHANNELS) -> bool:
    """
    True if every row reads the same left to right and right to left.
    Only the first ``channels`` channels are compared (alpha is ignored by default).
    Grayscale ``(H, W)`` arrays are compared as a single channel.
    """
    if arr.ndim == 2:
        return bool(np.array_equal(arr, arr[:, ::-1]))
    colors: UInt8Array = arr[..., :channels]
    return bool(np.array_equal(colors, colors[:, ::-1]))


def horizontal_mismatches(arr: UInt8Array, channels: int = RGB_CHANNELS) -> int:
    """
    Count pixels whose color differs from their horizontal mirror.
    Each asymmetric pair is counted twice (once per side).
    """
    if arr.ndim == 2:
        return int(np.count_nonzero(arr != arr[:, ::-1]))
    colors: UInt8Array = arr[..., :channels]
    return int(np.count_nonzero(np.any(colors != colors[:, ::-1], axis=-1)))
