from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from pixel_pattern import (
    CodecError,
    GenerateOptions,
    InvalidColorCountError,
    InvalidDimensionError,
    generate_from_options,
    generate_image,
)
from tests.test_utils import distinct_colors


def test_default_parameters(tmp_path: Path) -> None:
    output = tmp_path / "default.png"
    image = generate_image(filename=str(output))
    assert image.metadata() == {"width": 256, "height": 256, "channels": 4, "mode": "RGBA"}
    assert output.exists()


def test_custom_dimensions(tmp_path: Path) -> None:
    output = tmp_path / "custom-dimensions.png"
    image = generate_image(width=512, height=384, filename=str(output))
    assert (image.width, image.height) == (512, 384)
    with Image.open(output) as loaded:
        assert loaded.size == (512, 384)


def test_no_file_without_filename(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    generate_image(seed="nofile", width=16, height=16)
    assert list(tmp_path.iterdir()) == []


def test_same_seed_is_deterministic(tmp_path: Path) -> None:
    first = tmp_path / "deterministic-1.png"
    second = tmp_path / "deterministic-2.png"
    generate_image(seed="test-deterministic-seed", filename=str(first))
    generate_image(seed="test-deterministic-seed", filename=str(second))
    assert first.read_bytes() == second.read_bytes()


def test_different_seeds_differ() -> None:
    one = generate_image(seed="seed-one").to_bytes()
    two = generate_image(seed="seed-two").to_bytes()
    assert one != two


def test_abc_scenario() -> None:
    first = generate_image(seed="abc", width=100, height=100, colors=2)
    second = generate_image(seed="abc", width=100, height=100, colors=2)
    assert (first.width, first.height, first.channels) == (100, 100, 4)
    assert first.is_symmetric()
    assert np.array_equal(first.to_array(), second.to_array())


def test_symmetry_after_png_round_trip(tmp_path: Path) -> None:
    output = tmp_path / "symmetry-test.png"
    generate_image(width=100, height=100, filename=str(output))
    with Image.open(output) as loaded:
        data = np.array(loaded)
    width = data.shape[1]
    for x in range(width // 2):
        assert np.array_equal(data[:, x, :3], data[:, width - 1 - x, :3])


def test_alpha_is_opaque() -> None:
    arr = generate_image(seed="alpha", colors=7, width=33, height=21).to_array()
    assert arr.shape == (21, 33, 4)
    assert (arr[..., 3] == 255).all()


def test_single_color_is_uniform() -> None:
    arr = generate_image(colors=1, width=40, height=30).to_array()
    assert len(distinct_colors(arr)) == 1


def test_high_color_count(tmp_path: Path) -> None:
    output = tmp_path / "high-colors.png"
    image = generate_image(colors=10, seed="many", filename=str(output))
    assert output.exists()
    assert image.width == 256
    assert 1 < len(distinct_colors(image.to_array())) <= 10


@pytest.mark.parametrize(
    "pwidth, pheight",
    [(4, 4), (32, 32), (64, 48), (2, 1), (5, 7), (1, 16), (3, 3)],
)
def test_boundary_pattern_sizes(pwidth: int, pheight: int) -> None:
    image = generate_image(seed=f"p{pwidth}x{pheight}", pwidth=pwidth, pheight=pheight)
    assert (image.width, image.height, image.channels) == (256, 256, 4)
    assert image.is_symmetric()


@pytest.mark.parametrize("width, height", [(1, 1), (3, 200), (255, 17)])
def test_odd_dimensions_stay_symmetric(width: int, height: int) -> None:
    image = generate_image(seed="odd", width=width, height=height, colors=5)
    assert (image.width, image.height) == (width, height)
    assert image.is_symmetric()


def test_further_processing() -> None:
    processed = generate_image().resize(128, 128).grayscale().to_bytes()
    assert isinstance(processed, bytes)
    assert len(processed) > 0


def test_generate_from_options_matches_keywords() -> None:
    options = GenerateOptions(seed="opts", width=64, height=48, colors=4, pwidth=8, pheight=6)
    from_options = generate_from_options(options).to_array()
    from_keywords = generate_image(
        seed="opts", width=64, height=48, colors=4, pwidth=8, pheight=6
    ).to_array()
    assert np.array_equal(from_options, from_keywords)


def test_parallel_generation_is_deterministic() -> None:
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(
            pool.map(lambda _: generate_image(seed="threads", width=64, height=64).to_bytes(), range(8))
        )
    assert len(set(results)) == 1


def test_invalid_inputs_fail_fast() -> None:
    with pytest.raises(InvalidColorCountError):
        generate_image(colors=0)
    with pytest.raises(InvalidDimensionError):
        generate_image(width=0)
    with pytest.raises(InvalidDimensionError):
        generate_image(pwidth=0)
    with pytest.raises(InvalidDimensionError):
        generate_image(pheight=0)


def test_unwritable_filename_raises_codec_error(tmp_path: Path) -> None:
    with pytest.raises(CodecError):
        generate_image(seed="x", width=8, height=8, filename=str(tmp_path))


def test_pattern_width_one_paints_whole_rows() -> None:
    image = generate_image(seed="odd-pwidth", width=64, height=64, pwidth=1, pheight=4)
    arr = image.to_array()
    # a single half column spans the full row width
    for row in arr:
        assert len(distinct_colors(row[np.newaxis])) == 1
    assert image.is_symmetric()
