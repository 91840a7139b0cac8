# rcimglab

A small lab toolkit with two halves:

- **Circuit step responses**: series RC and RL circuits driven by a DC
  source, sampled at a fixed time step, with the current plotted to SVG.
- **Greyscale image filters**: read and write binary PGM (`P5`) images and
  apply binarize, invert, brighten and sharpen filters.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `rcimglab`, with three subcommands:

```
rcimglab --help
rcimglab rc R C Vin [--svg FILE] [--width W] [--height H]
rcimglab rl R L Vin [--svg FILE] [--width W] [--height H]
rcimglab image INPUT {binarize,brighten,invert,sharpen} OUTPUT
```

- `rc` / `rl` validate the three values, print a short summary of the run to
  standard error, and then either write the samples as CSV
  (`time,voltage,current,power`) to standard output or, with `--svg`, write a
  graph of the current to that file (640 x 480 unless `--width`/`--height`
  say otherwise).
- `image` reads a PGM file, applies the chosen filter, writes the result as
  PGM and prints the name of the applied filter.

The exit status is 0 on success and 1 when the inputs are not numbers, are
not all positive, the image cannot be read or written, or the file is not a
binary PGM; the message goes to standard error. Messages and graph labels
are in Korean.

## Circuit simulation

```python
from rcimglab.circuits import simulate_rc, simulate_rl

rc = simulate_rc(1000.0, 1e-3, 5.0)            # dt=0.005, steps=1000
rl = simulate_rl(10.0, 0.5, 5.0, dt=0.01, steps=1000)
```

Each call returns a frozen `Waveform` with the tuples `time`, `voltage`,
`current` and `power`; `len(waveform)` is the number of samples. A zero
resistance, capacitance or inductance raises `ValueError`.

- RC: the capacitor voltage is `Vin * (1 - exp(-t / RC))`, the current
  `(Vin / R) * exp(-t / RC)`, and the power their product.
- RL: the current is `(Vin / R) * (1 - exp(-R t / L))`, the coil voltage
  `Vin - i R`, and the power `Vin * i`.

`rcimglab.simulator` works on values as a user types them:

- `parse_inputs(resistance, reactive, vin)` reads numbers or text (the
  longest numeric prefix, like C `strtod`) and raises `InputError` when there
  is none.
- `run_simulation(kind, resistance, reactive, vin)` parses the values,
  raises `InputError` unless all three are positive, and runs the circuit
  chosen by `CircuitKind.RC` or `CircuitKind.RL`.
- `describe_run(kind, resistance, reactive, vin)` formats the summary of a
  run.

## Plotting

```python
from rcimglab.graph import render_svg

svg = render_svg(rc.time, rc.current, "RC", 640, 480, 40)
```

`render_svg` draws the axes, the curve, the title and the axis labels.
`plot_segments(time, values, width, height, margin)` returns the curve as
`Segment` objects in pixel coordinates, and `value_range(values)` widens a
nearly flat series by 0.5 each way so that it still plots.

## Image filters

```python
from rcimglab.pgm import FilterMode, read_pgm, write_pgm

image = read_pgm("input.pgm")
result = image.copy()
result.apply(FilterMode.SHARPEN)   # or result.sharpen()
write_pgm(result, "output.pgm")
```

`GrayImage` filters change the image in place. Sharpening keeps the border
pixels. `parse_pgm` decodes bytes, ignores the maximum value for scaling and
fills missing pixel data with zeros; a malformed header raises `PGMError`.
`GrayImage.to_bytes` encodes the image as PGM.

`rcimglab.imageproc.ImageSession` keeps a loaded original apart from its
filtered copy: `load`, `apply`, `save` and `reset`, with `filter_info`
describing the applied filter. It raises `SessionError` when a step comes out
of order, for example saving before any filter was applied, or when the
result cannot be written. `filter_label(mode)` gives a filter's display name.

## What it does not do

There is no graphical interface: images are not displayed and graphs are
not shown on screen, only written as SVG files. Only binary PGM images are
read and written.