"""Command line interface for the spectrum synthesizer."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List

from .config import Modality, Nucleus
from .engine import synthesize
from .io import save_result
from .nmr import MULTIPLICITIES
from .peaks import NMRResult, SpectrumResult

logger = logging.getLogger(__name__)

_COMMANDS = {"ir": Modality.IR, "uv": Modality.UV_VIS, "nmr": Modality.NMR}


def format_peaks(result: SpectrumResult | NMRResult) -> List[str]:
    if not result.peaks:
        return ["no peaks"]
    if isinstance(result, NMRResult):
        return [
            f"{p.shift:8.2f} ppm  {p.intensity:5.2f}  {MULTIPLICITIES.get(p.multiplicity, p.multiplicity):14s} {p.label}"
            for p in result.peaks
        ]
    settings = result.settings
    return [
        f"{p.position:8.1f}  {p.response:8.3f}  {p.label}"
        for p in result.peaks
    ] + [f"({len(result.curve)} {settings.axis_name} samples)"]


def run(command: str, descriptor: str, nucleus: str, seed: int | None, out: Path | None) -> SpectrumResult | NMRResult:
    result = synthesize(descriptor, _COMMANDS[command], nucleus, rng=seed)
    if out is not None:
        print(save_result(out, result, descriptor=descriptor))
    else:
        for line in format_peaks(result):
            print(line)
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="specsynth")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    sub = parser.add_subparsers(dest="cmd", required=True)

    for name, help_text in (
        ("ir", "infrared transmittance spectrum"),
        ("uv", "UV-Vis absorbance spectrum"),
        ("nmr", "NMR peak list"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("descriptor", nargs="?", default="")
        p.add_argument("--seed", type=int)
        p.add_argument("--out", type=Path)
        if name == "nmr":
            p.add_argument("--nucleus", choices=[n.value for n in Nucleus], default=Nucleus.H1.value)

    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    nucleus = getattr(args, "nucleus", None)
    logger.info("Synthesizing %s spectrum for %r", args.cmd, args.descriptor)
    run(args.cmd, args.descriptor, nucleus, args.seed, args.out)


if __name__ == "__main__":  # pragma: no cover
    main()
