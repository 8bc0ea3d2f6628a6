import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from hypothesis.extra import numpy as hnp

from colorvisionsim.params import ColorVisionType
from colorvisionsim.simulate import (
    simulate,
    simulate_achromat,
    simulate_brettel1997,
    simulate_buffer,
    simulate_vienot1999,
)

SIMULATION_PARAMS = [
    pytest.param(ColorVisionType.PROTAN, 1.0, id="protan_1.0"),
    pytest.param(ColorVisionType.PROTAN, 0.55, id="protan_0.55"),
    pytest.param(ColorVisionType.DEUTAN, 1.0, id="deutan_1.0"),
    pytest.param(ColorVisionType.DEUTAN, 0.55, id="deutan_0.55"),
    pytest.param(ColorVisionType.TRITAN, 1.0, id="tritan_1.0"),
    pytest.param(ColorVisionType.TRITAN, 0.55, id="tritan_0.55"),
]


def _gray_ramp():
    values = np.arange(256, dtype=np.uint8)
    alpha = np.full(256, 200, dtype=np.uint8)
    return np.stack([values, values, values, alpha], axis=-1)


def _sample_image():
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(6, 5, 4), dtype=np.uint8)


def _max_diff(a, b):
    return int(np.abs(a.astype(int) - b.astype(int)).max())


@pytest.mark.parametrize(("kind", "severity"), SIMULATION_PARAMS)
def test_brettel1997_preserves_gray(kind, severity):
    if kind is ColorVisionType.TRITAN:
        simulate_fn = simulate_vienot1999
    else:
        simulate_fn = simulate_brettel1997
    ramp = _gray_ramp()
    out = simulate_fn(kind, severity, ramp)
    assert _max_diff(out, ramp) <= 1
    assert np.array_equal(out[..., 3], ramp[..., 3])


@pytest.mark.parametrize(("kind", "severity"), SIMULATION_PARAMS)
def test_vienot1999_preserves_gray(kind, severity):
    ramp = _gray_ramp()
    out = simulate_vienot1999(kind, severity, ramp)
    assert _max_diff(out, ramp) <= 1


@pytest.mark.parametrize(("kind", "severity"), SIMULATION_PARAMS)
def test_shape_alpha_and_input_preserved(kind, severity):
    image = _sample_image()
    original = image.copy()
    out = simulate(kind, severity, image)
    assert out.shape == image.shape
    assert out.dtype == np.uint8
    assert np.array_equal(out[..., 3], image[..., 3])
    assert np.array_equal(image, original)


@pytest.mark.parametrize(("kind", "severity"), SIMULATION_PARAMS)
def test_black_stays_black(kind, severity):
    black = np.array([[0, 0, 0, 255]], dtype=np.uint8)
    assert np.array_equal(simulate(kind, severity, black), black)


@pytest.mark.parametrize("kind", list(ColorVisionType))
def test_zero_severity_is_near_identity(kind):
    image = _sample_image()
    out = simulate(kind, 0.0, image)
    assert _max_diff(out, image) <= 1


@pytest.mark.parametrize("kind", [ColorVisionType.PROTAN, ColorVisionType.DEUTAN])
def test_red_green_confusion(kind):
    red = np.array([[0, 0, 255, 255]], dtype=np.uint8)
    green = np.array([[0, 255, 0, 255]], dtype=np.uint8)
    before = _max_diff(red, green)
    after = _max_diff(simulate(kind, 1.0, red), simulate(kind, 1.0, green))
    assert after < before


def test_dispatch_matches_specific_models():
    image = _sample_image()
    assert np.array_equal(
        simulate(ColorVisionType.PROTAN, 0.7, image),
        simulate_brettel1997(ColorVisionType.PROTAN, 0.7, image),
    )
    assert np.array_equal(
        simulate(ColorVisionType.DEUTAN, 0.7, image),
        simulate_brettel1997(ColorVisionType.DEUTAN, 0.7, image),
    )
    assert np.array_equal(
        simulate(ColorVisionType.TRITAN, 0.7, image),
        simulate_vienot1999(ColorVisionType.TRITAN, 0.7, image),
    )
    assert np.array_equal(
        simulate(ColorVisionType.ACHROMAT, 0.7, image),
        simulate_achromat(0.7, image),
    )


def test_common_vision_returns_unchanged_copy():
    image = _sample_image()
    out = simulate(ColorVisionType.COMMON, 1.0, image)
    assert np.array_equal(out, image)
    out[0, 0, 0] ^= 1
    assert not np.array_equal(out, image)


@pytest.mark.parametrize("severity", [1.0, 0.55])
def test_achromat(severity):
    image = _sample_image()
    out = simulate_achromat(severity, image)
    assert np.array_equal(out[..., 3], image[..., 3])
    if severity == 1.0:
        assert np.array_equal(out[..., 0], out[..., 1])
        assert np.array_equal(out[..., 1], out[..., 2])


def test_achromat_partial_lies_between():
    image = _sample_image()
    full = simulate_achromat(1.0, image).astype(int)
    half = simulate_achromat(0.5, image).astype(int)
    assert half.shape == image.shape
    lower = np.minimum(image.astype(int), full) - 1
    upper = np.maximum(image.astype(int), full) + 1
    below = int((half[..., :3] < lower[..., :3]).sum())
    above = int((half[..., :3] > upper[..., :3]).sum())
    assert below == 0
    assert above == 0


def test_brettel_rejects_achromat():
    with pytest.raises(ValueError):
        simulate_brettel1997(ColorVisionType.ACHROMAT, 1.0, _sample_image())


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        simulate(ColorVisionType.PROTAN, 1.0, np.zeros((4, 3), dtype=np.uint8))


def test_out_of_range_pixels_raise():
    with pytest.raises(ValueError):
        simulate(ColorVisionType.PROTAN, 1.0, np.array([[0, 0, 300, 255]]))


def test_simulate_buffer_matches_array():
    image = _sample_image()
    height, width = image.shape[:2]
    data, w, h = simulate_buffer(1, 1.0, image.tobytes(), width, height)
    assert (w, h) == (width, height)
    expected = simulate(ColorVisionType.PROTAN, 1.0, image.reshape(-1, 4))
    assert data == expected.tobytes()


def test_simulate_buffer_keeps_trailing_bytes():
    image = _sample_image().reshape(-1, 4)
    tail = b"\x01\x02\x03"
    data, _, _ = simulate_buffer(4, 1.0, image.tobytes() + tail, 5, 6)
    assert data.endswith(tail)
    assert len(data) == image.size + len(tail)


def test_simulate_buffer_unknown_kind_is_identity():
    raw = _sample_image().tobytes()
    data, _, _ = simulate_buffer(0, 1.0, bytearray(raw), 5, 6)
    assert data == raw


def test_simulate_buffer_too_short_raises():
    with pytest.raises(ValueError):
        simulate_buffer(1, 1.0, b"\x00" * 7, 1, 2)


def test_simulate_buffer_negative_size_raises():
    with pytest.raises(ValueError):
        simulate_buffer(1, 1.0, b"", -1, 1)


@settings(max_examples=40, deadline=None)
@given(
    hnp.arrays(np.uint8, st.tuples(st.integers(0, 8), st.just(4))),
    st.sampled_from(list(ColorVisionType)),
    st.floats(min_value=0, max_value=1, allow_nan=False),
)
def test_random_images_keep_alpha(image, kind, severity):
    out = simulate(kind, severity, image)
    assert out.shape == image.shape
    assert np.array_equal(out[..., 3], image[..., 3])