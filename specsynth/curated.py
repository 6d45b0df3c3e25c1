"""Curated peak sets for descriptors that bypass the generic heuristics.

The table is consulted before any pattern heuristic runs. Entries are keyed
by the exact descriptor string; there is no normalisation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np

from .peaks import NMRPeak, PeakSpec


@dataclass(frozen=True)
class CuratedBand:
    """IR band drawn as ``center +/- jitter / 2`` with ranged depth and width."""

    center: float
    jitter: float
    target: Tuple[float, float]
    width: Tuple[float, float]
    label: str

    def draw(self, rng: np.random.Generator) -> PeakSpec:
        return PeakSpec(
            center=self.center + (rng.random() - 0.5) * self.jitter,
            target=self.target[0] + rng.random() * self.target[1],
            width=self.width[0] + rng.random() * self.width[1],
            label=self.label,
        )


@dataclass(frozen=True)
class CuratedResonance:
    shift: float
    jitter: float
    intensity: float
    multiplicity: str
    label: str
    atom_ids: Tuple[int, ...]

    def draw(self, rng: np.random.Generator) -> NMRPeak:
        return NMRPeak(
            shift=self.shift + (rng.random() - 0.5) * self.jitter,
            intensity=self.intensity,
            multiplicity=self.multiplicity,
            label=self.label,
            atom_ids=self.atom_ids,
        )


@dataclass(frozen=True)
class CuratedEntry:
    name: str
    ir: Tuple[CuratedBand, ...] = ()
    # substring -> display label, first match wins
    ir_labels: Mapping[str, str] = field(default_factory=dict)
    # (center, half-width) zones kept free of fingerprint scatter
    fingerprint_exclusions: Tuple[Tuple[float, float], ...] = ()
    h1: Tuple[CuratedResonance, ...] = ()
    c13: Tuple[CuratedResonance, ...] = ()


CURATED: Dict[str, CuratedEntry] = {
    "CC(=O)C": CuratedEntry(
        name="acetone",
        ir=(
            CuratedBand(1715.0, 5.0, (5.0, 5.0), (18.0, 5.0), "C=O"),
            CuratedBand(2965.0, 10.0, (50.0, 10.0), (20.0, 10.0), "C-H"),
            CuratedBand(2925.0, 10.0, (55.0, 15.0), (20.0, 10.0), "C-H"),
            CuratedBand(1430.0, 10.0, (40.0, 10.0), (15.0, 8.0), "CH3 bend"),
            CuratedBand(1360.0, 5.0, (45.0, 10.0), (12.0, 5.0), "CH3 bend"),
            CuratedBand(1220.0, 10.0, (40.0, 15.0), (20.0, 8.0), "C-C stretch"),
        ),
        ir_labels={"C-C": "C-C", "CH3 bend": "CH3", "C=O": "C=O", "C-H": "C-H"},
        fingerprint_exclusions=((1220.0, 50.0),),
        h1=(CuratedResonance(2.1, 0.1, 1.0, "s", "CH3", (1, 2)),),
        c13=(
            CuratedResonance(206.0, 2.0, 0.4, "s", "C=O", (1,)),
            CuratedResonance(30.0, 1.0, 1.0, "s", "CH3", (2, 3)),
        ),
    ),
}


def lookup(descriptor: str) -> CuratedEntry | None:
    return CURATED.get(descriptor)


def draw_bands(bands: Sequence[CuratedBand], rng: np.random.Generator) -> List[PeakSpec]:
    return [band.draw(rng) for band in bands]


def draw_resonances(resonances: Sequence[CuratedResonance], rng: np.random.Generator) -> List[NMRPeak]:
    return [res.draw(rng) for res in resonances]


__all__ = [
    "CuratedBand",
    "CuratedResonance",
    "CuratedEntry",
    "CURATED",
    "lookup",
    "draw_bands",
    "draw_resonances",
]
