"""Single entry point dispatching a descriptor to a modality strategy."""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

from . import ir, nmr, uvvis
from .config import Modality, Nucleus
from .features import DEFAULT_DETECTOR, FeatureDetector
from .peaks import NMRResult, SpectrumResult

logger = logging.getLogger(__name__)

SynthesisResult = Union[SpectrumResult, NMRResult]
RandomSource = Union[np.random.Generator, int, None]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return ``rng`` as a generator; ints seed a new one, ``None`` is unseeded."""

    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def synthesize(
    descriptor: str | None,
    modality: Modality | str,
    nucleus: Nucleus | str | None = None,
    *,
    rng: RandomSource = None,
    detector: FeatureDetector | None = None,
) -> SynthesisResult:
    """Synthesize a spectrum for ``descriptor``.

    Parameters
    ----------
    descriptor:
        Line-notation molecule string. Any string is accepted; an empty one
        produces an empty result.
    modality:
        ``IR``, ``UV-VIS`` or ``NMR`` (enum member or string).
    nucleus:
        ``1H`` or ``13C``; only read for NMR, defaults to ``1H``.
    rng:
        Random source for peak jitter and noise. Pass a seed or a generator
        for reproducible output.
    detector:
        Functional group detector, the SMILES pattern heuristics by default.

    Returns
    -------
    SpectrumResult | NMRResult
        Curve and labeled peaks for IR/UV-Vis, a shift-sorted peak list for
        NMR.
    """

    modality = Modality.parse(modality)
    nuc = Nucleus.parse(nucleus) if modality is Modality.NMR else None
    descriptor = descriptor or ""
    gen = make_rng(rng)
    flags = (detector or DEFAULT_DETECTOR).detect(descriptor)
    logger.debug("%s %r: flags %s", modality.value, descriptor, flags)

    if modality is Modality.IR:
        return ir.synthesize(flags, descriptor, gen)
    if modality is Modality.UV_VIS:
        return uvvis.synthesize(flags, descriptor, gen)
    return nmr.synthesize(flags, descriptor, gen, nuc)


def simulate_ir(descriptor: str | None, *, rng: RandomSource = None) -> SpectrumResult:
    return synthesize(descriptor, Modality.IR, rng=rng)  # type: ignore[return-value]


def simulate_uv(descriptor: str | None, *, rng: RandomSource = None) -> SpectrumResult:
    return synthesize(descriptor, Modality.UV_VIS, rng=rng)  # type: ignore[return-value]


def simulate_nmr(
    descriptor: str | None,
    nucleus: Nucleus | str = Nucleus.H1,
    *,
    rng: RandomSource = None,
) -> NMRResult:
    return synthesize(descriptor, Modality.NMR, nucleus, rng=rng)  # type: ignore[return-value]


__all__ = [
    "SynthesisResult",
    "make_rng",
    "synthesize",
    "simulate_ir",
    "simulate_uv",
    "simulate_nmr",
]
