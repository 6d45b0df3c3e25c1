"""1H and 13C NMR strategies.

NMR synthesis stops at a peak list; :func:`render_envelope` turns a list
into a display curve for callers that want one.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence

import numpy as np

from .config import NMR_ENVELOPES, Nucleus
from .curated import draw_resonances, lookup
from .features import FeatureFlags, is_aldehyde
from .lineshapes import lorentzian
from .peaks import Curve, NMRPeak, NMRResult

logger = logging.getLogger(__name__)

MULTIPLICITIES: Dict[str, str] = {
    "s": "singlet",
    "d": "doublet",
    "t": "triplet",
    "q": "quartet",
    "m": "multiplet",
    "bs": "broad singlet",
}


class _PeakList:
    """Collects peaks and hands out running atom indices."""

    def __init__(self, rng: np.random.Generator) -> None:
        self.rng = rng
        self.peaks: List[NMRPeak] = []
        self._atom = 0

    def add(
        self,
        shift: float,
        shift_span: float,
        intensity: float,
        intensity_span: float,
        multiplicity: str,
        label: str,
    ) -> None:
        self._atom += 1
        self.peaks.append(
            NMRPeak(
                shift=shift + self.rng.random() * shift_span,
                intensity=intensity + self.rng.random() * intensity_span,
                multiplicity=multiplicity,
                label=label,
                atom_ids=(self._atom,),
            )
        )


def proton_peaks(flags: FeatureFlags, descriptor: str, rng: np.random.Generator) -> List[NMRPeak]:
    out = _PeakList(rng)
    if flags.has_aromatic:
        out.add(7.2, 1.3, 0.5, 0.5, "m", "Aromatic H")
    if flags.has_alkene:
        out.add(5.5, 1.0, 0.4, 0.4, "m", "Alkene H")
    if flags.has_ketone_aldehyde and is_aldehyde(descriptor):
        out.add(9.5, 0.5, 0.3, 0.3, "s", "Aldehyde H")
    if flags.has_cooh:
        out.add(10.0, 2.0, 0.2, 0.2, "bs", "Acid OH")
    if flags.has_oh:
        out.add(3.0, 2.5, 0.2, 0.3, "bs", "Alcohol/Phenol OH")
    if flags.has_nh:
        out.add(2.0, 3.0, 0.2, 0.3, "bs", "Amine NH")
    if flags.has_amide_nh:
        out.add(6.0, 2.5, 0.2, 0.3, "bs", "Amide NH")
    if flags.has_carbonyl or flags.has_ether or flags.has_oh:
        out.add(2.2, 1.8, 0.6, 0.4, "m", "H alpha to heteroatom/C=O")
    if flags.has_sp3_ch:
        out.add(1.3, 0.8, 0.8, 0.2, "m", "Aliphatic CHx")
        out.add(0.9, 0.4, 1.0, 0.3, "m", "Aliphatic CHx (upfield)")
    return out.peaks


def carbon_peaks(flags: FeatureFlags, descriptor: str, rng: np.random.Generator) -> List[NMRPeak]:
    """Broadband-decoupled 13C peaks, all singlets."""

    out = _PeakList(rng)
    if flags.has_carbonyl:
        if flags.has_ketone_aldehyde:
            out.add(195, 15, 0.3, 0.2, "s", "C=O (Ketone/Aldehyde)")
        elif flags.has_ester:
            out.add(165, 15, 0.3, 0.2, "s", "C=O (Ester)")
        elif flags.has_amide:
            out.add(160, 15, 0.3, 0.2, "s", "C=O (Amide)")
        elif flags.has_cooh:
            out.add(170, 15, 0.3, 0.2, "s", "C=O (Acid)")
        else:
            out.add(170, 0, 0.3, 0.2, "s", "Carbonyl C")
    if flags.has_aromatic:
        out.add(128, 20, 0.6, 0.3, "s", "Aromatic C")
        out.add(115, 15, 0.5, 0.3, "s", "Aromatic C")
    if flags.has_alkene:
        out.add(110, 30, 0.5, 0.3, "s", "Alkene C=C")
    if flags.has_alkyne:
        out.add(70, 20, 0.4, 0.3, "s", "Alkyne C#C")
    if flags.has_oh or flags.has_ether or flags.has_ester:
        out.add(55, 25, 0.7, 0.2, "s", "C-O")
    if flags.has_nh or flags.has_amide:
        out.add(40, 20, 0.6, 0.2, "s", "C-N")
    if flags.has_sp3_ch:
        out.add(25, 20, 0.9, 0.1, "s", "Aliphatic C")
        out.add(15, 10, 1.0, 0.1, "s", "Aliphatic C (upfield)")
    return out.peaks


_GENERATORS: Dict[Nucleus, Callable[[FeatureFlags, str, np.random.Generator], List[NMRPeak]]] = {
    Nucleus.H1: proton_peaks,
    Nucleus.C13: carbon_peaks,
}


def synthesize(
    flags: FeatureFlags,
    descriptor: str,
    rng: np.random.Generator,
    nucleus: Nucleus | str = Nucleus.H1,
) -> NMRResult:
    """Peak list for ``nucleus``, sorted by descending chemical shift."""

    nucleus = Nucleus.parse(nucleus)
    if not descriptor:
        return NMRResult(nucleus, [])

    entry = lookup(descriptor)
    curated = None
    if entry is not None:
        curated = entry.h1 if nucleus is Nucleus.H1 else entry.c13
    if curated:
        logger.debug("NMR %s: curated peak set '%s'", nucleus.value, entry.name)
        peaks = draw_resonances(curated, rng)
    else:
        peaks = _GENERATORS[nucleus](flags, descriptor, rng)
    peaks.sort(key=lambda p: p.shift, reverse=True)
    logger.debug("NMR %s: %d peaks", nucleus.value, len(peaks))
    return NMRResult(nucleus, peaks)


def render_envelope(peaks: Sequence[NMRPeak], nucleus: Nucleus | str = Nucleus.H1) -> Curve:
    """Sum of display Lorentzians, axis running from high to low shift.

    Heights are clipped at the envelope ceiling so stacked multiplets do
    not overshoot the plot.
    """

    settings = NMR_ENVELOPES[Nucleus.parse(nucleus)]
    x = np.linspace(settings.shift_max, settings.shift_min, settings.resolution, endpoint=False)
    y = np.zeros_like(x)
    for peak in peaks:
        y += lorentzian(x, peak.shift, 2 * settings.half_width, peak.intensity)
    return Curve(x, np.minimum(y, settings.ceiling))


__all__ = [
    "MULTIPLICITIES",
    "proton_peaks",
    "carbon_peaks",
    "synthesize",
    "render_envelope",
]
