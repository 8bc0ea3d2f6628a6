# colorvisionsim

Color vision deficiency simulation for 8-bit BGRA images.

The following kinds of vision are supported:

- **Protan** and **Deutan**, using the Brettel, Viénot & Mollon (1997) two-plane method
- **Tritan**, using the Viénot, Brettel & Mollon (1999) single-projection method
- **Achromat**, which blends toward the CIE XYZ luminance

A `severity` between `0.0` and `1.0` sets how far each pixel moves from its original
color toward the simulated color. Blending happens in linear RGB. The result is then
encoded back to 8-bit sRGB.

## Installation

```
pip install colorvisionsim
```

numpy is the only dependency.

## Usage

An image is any integer array whose last axis has four channels in B, G, R, A order,
with values from 0 to 255. Pass it to `simulate` together with a `ColorVisionType`:

```python
import numpy as np
from colorvisionsim.params import ColorVisionType
from colorvisionsim.simulate import simulate

image = np.zeros((480, 640, 4), dtype=np.uint8)  # BGRA
image[..., 2] = 255   # pure red
image[..., 3] = 255

result = simulate(ColorVisionType.PROTAN, 1.0, image)
```

`simulate` returns a new `uint8` array with the same shape and does not modify the
input. It picks the method that matches the kind:

- `PROTAN` and `DEUTAN` go to `simulate_brettel1997(kind, severity, image)`
- `TRITAN` goes to `simulate_vienot1999(kind, severity, image)`
- `ACHROMAT` goes to `simulate_achromat(severity, image)`
- `COMMON` returns an unchanged copy

You can also call these functions directly. `simulate_brettel1997` and
`simulate_vienot1999` both accept `PROTAN`, `DEUTAN` and `TRITAN`. Every method
changes the B, G and R channels and leaves alpha as it is.

The following inputs raise errors:

- `ValueError` if the last axis does not have four channels
- `TypeError` if the channels are not integers
- `ValueError` if a channel value is outside 0..255

### Raw buffers

`simulate_buffer(kind, severity, data, width, height)` works on any bytes-like object
that holds at least `width * height` BGRA pixels. It returns a tuple
`(data, width, height)`, where `data` is a new `bytes` object holding the processed
pixels. Any bytes after the last pixel are appended unchanged. The input object is not
modified.

Here `kind` is an integer code:

| code | type     |
|------|----------|
| 1    | Protan   |
| 2    | Deutan   |
| 3    | Tritan   |
| 4    | Achromat |

Any other code means common vision, and the pixels come back unchanged.

`simulate_buffer` raises `ValueError` in two cases:

- the width or height is negative
- the buffer is shorter than `width * height * 4` bytes

`to_color_vision_type(value)` from `colorvisionsim.params` does the same code mapping
and returns a `ColorVisionType`.

### Parameters

`Brettel1997Params.for_type(kind)` and `Vienot1999Params.for_type(kind)` return the
frozen dataclasses that hold each method's matrices:

- Brettel 1997 uses `mat1`, `mat2` and the separating plane's `normal`.
- Viénot 1999 uses a single `mat`.

Both accept `PROTAN`, `DEUTAN` and `TRITAN`. Any other kind raises `ValueError`.

### Color helpers

`colorvisionsim.color` provides two conversion functions:

- `to_linear_rgb(v)` decodes 8-bit sRGB values (an int or an integer array) to linear
  intensities in `[0, 1]`.
- `to_srgb(v)` encodes linear intensities back to 8-bit values. It clamps to 0..255,
  maps NaN to 0, and truncates rather than rounds in the gamma segment.

Scalar input gives a scalar result, and array input gives an array result.

## What this package does not do

This package only transforms pixel arrays and byte buffers in memory. It does not:

- read or write image files
- provide a command-line tool
- offer GPU acceleration

All processing runs on the CPU through numpy.

## Running the tests

```
pip install "colorvisionsim[test]"
pytest
```