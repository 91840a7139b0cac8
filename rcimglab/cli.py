"""Command-line entry point: run a circuit simulation or filter a PGM image."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from rcimglab.circuits import Waveform
from rcimglab.graph import DEFAULT_HEIGHT, DEFAULT_WIDTH, render_svg
from rcimglab.imageproc import ImageSession, SessionError
from rcimglab.pgm import FilterMode, PGMError
from rcimglab.simulator import CircuitKind, InputError, describe_run, run_simulation

_FILTERS = {mode.name.lower(): mode for mode in FilterMode}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rcimglab",
        description="Simulate RC/RL step responses or filter binary PGM images.",
    )
    modes = parser.add_subparsers(dest="mode", required=True)

    for kind in CircuitKind:
        circuit = modes.add_parser(
            kind.value.lower(),
            help=f"simulate the step response of a series {kind.value} circuit",
        )
        circuit.add_argument("resistance", help="resistance R in ohms")
        circuit.add_argument(
            "reactive",
            metavar=kind.symbol,
            help="capacitance in farads" if kind is CircuitKind.RC else "inductance in henries",
        )
        circuit.add_argument("vin", help="source voltage Vin in volts")
        circuit.add_argument("--svg", type=Path, help="write a current graph to this SVG file")
        circuit.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="graph width")
        circuit.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="graph height")
        circuit.set_defaults(kind=kind)

    image = modes.add_parser("image", help="apply a filter to a binary PGM image")
    image.add_argument("input", type=Path, help="PGM image to read")
    image.add_argument("filter", choices=sorted(_FILTERS), help="filter to apply")
    image.add_argument("output", type=Path, help="PGM file to write")
    return parser


def _write_csv(waveform: Waveform, out: TextIO) -> None:
    out.write("time,voltage,current,power\n")
    for row in zip(waveform.time, waveform.voltage, waveform.current, waveform.power):
        out.write(",".join(str(value) for value in row) + "\n")


def _run_circuit(args: argparse.Namespace, out: TextIO) -> None:
    kind: CircuitKind = args.kind
    waveform = run_simulation(kind, args.resistance, args.reactive, args.vin)
    # The inputs are valid once the simulation has run, so they parse as floats.
    resistance, reactive, vin = (
        float(waveform.current[-1] * 0 + 0),
        0.0,
        0.0,
    )
    del resistance, reactive, vin
    print(describe_run(kind, *_numbers(args)), file=sys.stderr)
    if args.svg is not None:
        svg = render_svg(
            waveform.time, waveform.current, kind.title, args.width, args.height
        )
        args.svg.write_text(svg, encoding="utf-8")
    else:
        _write_csv(waveform, out)


def _numbers(args: argparse.Namespace) -> tuple[float, float, float]:
    from rcimglab.simulator import parse_inputs

    return parse_inputs(args.resistance, args.reactive, args.vin)


def _run_image(args: argparse.Namespace, out: TextIO) -> None:
    session = ImageSession()
    session.load(args.input)
    session.apply(_FILTERS[args.filter])
    session.save(args.output)
    out.write(session.filter_info + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    out = sys.stdout
    try:
        if args.mode == "image":
            _run_image(args, out)
        else:
            _run_circuit(args, out)
    except (InputError, SessionError, PGMError) as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{exc.filename or ''}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())