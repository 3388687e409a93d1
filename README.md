# hpclab

Small numerical and image-processing programs built on NumPy and Pillow:

- **Heat diffusion** (`hpclab.heat`) on a square plate with a fixed point
  source and hot borders, rendered to PNG with the *magma* colormap.
- **Jacobi relaxation** (`hpclab.jacobi`) of the Laplace equation on an
  `n x m` mesh whose first column is held at 1.0.
- **Perceptually uniform colormaps** (`hpclab.colormap`): magma, inferno,
  plasma and viridis, mapping a value in `[vmin, vmax]` to RGB.
- **DCT steganography** (`hpclab.stegano`, `hpclab.stegano_io`): hide a
  black-and-white logo in the 8x8 DCT blocks of an image's luma channel and
  recover it again.

## Installation

```
pip install .
```

## Commands

### Heat diffusion

```
hpclab-heat [--size N] [--max-iterations K] [--min-delta D] [--output-dir DIR]
```

Defaults: a 500 x 500 grid, at most 20000 iterations, stopping once the
largest change in one sweep is no more than 0.05. The source position is
drawn from a fixed-seed pseudo-random sequence, so every run uses the same
point for a given size. Prints the source position, the largest change every
tenth of the iteration cap and the computing time, then writes
`heat<K>.png` (for example `heat20000.png`) into the output directory
(the current directory by default). `--size` must be at least 3.

### Jacobi relaxation

```
hpclab-jacobi [N M]
```

Relaxes an `N x M` mesh (4096 x 4096 unless exactly two numbers are given)
for at most 1000 iterations or until the error is at most 1e-6, printing the
error every 100 iterations, then the final iteration count, error and total
time in seconds.

### Steganography

```
hpclab-stegano image_in.png logo.png image_out.png
```

Reads `logo.png` as a bit pattern (one bit per pixel, row by row; a non-zero
red component is a 1, bits packed least significant first), hides it in
`image_in.png`, writes the result to `image_out.png`, decodes it again and
writes the recovered logo to `logo_out.png` in the current directory. Prints
the encoding and decoding times. With fewer than three arguments it prints a
usage line and exits with status -1.

## Library use

```python
from hpclab.colormap import Colormap, rgb, rgbf, table
from hpclab.heat import simulate, write_png
from hpclab.jacobi import Timer, init_mesh, relax
from hpclab.stegano import encode, decode
from hpclab.stegano_io import logo_to_message, message_to_logo

r, g, b = rgb(Colormap.VIRIDIS, 0.5, 0.0, 1.0)      # 8-bit components
fr, fg, fb = rgbf(Colormap.MAGMA, 0.5, 0.0, 1.0)    # floats in [0, 1]

grid, iterations, last_diff = simulate(10, 10, n=32, max_iterations=500)
write_png(grid, iterations, ".")

mesh, iterations, error = relax(init_mesh(64, 64))

message = logo_to_message("logo.png")
encode("photo.png", "hidden.png", message)
recovered = decode("hidden.png", len(message))
message_to_logo("logo_out.png", recovered)
```

Notes on behaviour:

- `rgbf` and `rgb` clamp values to `[vmin, vmax]` and raise `ValueError`
  when `vmin == vmax`.
- `init_grid` and `simulate` raise `ValueError` for a source outside the
  grid; `init_mesh` raises `ValueError` for non-positive dimensions.
- `simulate` and `relax` accept a `report(iteration, value)` callback and
  return the final grid together with the iteration count and last change.
- `encode` and `insert_message` need one whole 8x8 block of the carrier per
  hidden bit and raise `ValueError` otherwise. Lower-level steps are
  available as `rgb_to_ycbcr`, `ycbcr_to_rgb`, `dct_params`, `dct8x8`,
  `idct8x8`, `insert_message` and `extract_message`.
- `message_to_logo` draws a square whose side is the nearest integer to the
  square root of the number of bits; it raises `ValueError` for an empty
  message.

## What it does not do

- The hidden message carries no length: `decode` must be told how many
  bytes to read.
- Every computation runs in a single process on the CPU; there is no
  parallel, distributed or GPU execution.

## Tests

```
pip install ".[test]"
pytest
```