"""Infrared strategy: characteristic bands, fingerprint scatter, rendering."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import (
    FINGERPRINT_ATTEMPTS,
    FINGERPRINT_CLEARANCE,
    FINGERPRINT_COUNT,
    FINGERPRINT_RANGE,
    IR_SETTINGS,
    STRONG_PEAK_TRANSMITTANCE,
    CurveSettings,
    Modality,
)
from .curated import CuratedEntry, draw_bands, lookup
from .features import FeatureFlags, is_aldehyde
from .lineshapes import lorentzian
from .peaks import Curve, PeakSpec, SpectrumResult, collapse_labels, extract

logger = logging.getLogger(__name__)

# (center, center span, target %T, target span, width, width span, label)
BandRow = Tuple[float, float, float, float, float, float, str]

OH_ALCOHOL: BandRow = (3350, 250, 30, 40, 100, 200, "O-H stretch (Alcohol/Phenol)")
OH_ACID: BandRow = (2800, 400, 40, 40, 300, 300, "O-H stretch (Carboxylic Acid)")
CO_ACID: BandRow = (1710, 20, 10, 20, 25, 15, "C=O stretch (Carboxylic Acid)")
NH_AMINE: BandRow = (3350, 150, 45, 35, 50, 50, "N-H stretch")
NH_AMINE_2: BandRow = (3400, 100, 50, 30, 40, 40, "N-H stretch")
NH_AMIDE: BandRow = (3200, 200, 40, 30, 60, 60, "N-H stretch (Amide)")
CH_SP3: Sequence[BandRow] = (
    (2960, 40, 40, 30, 25, 15, "C-H stretch (sp3)"),
    (2870, 40, 50, 30, 30, 15, "C-H stretch (sp3)"),
    (1450, 30, 50, 30, 20, 10, "C-H bend (sp3)"),
    (1375, 15, 55, 25, 15, 10, "C-H bend (sp3)"),
)
CH_SP2: BandRow = (3050, 70, 70, 20, 15, 10, "C-H stretch (sp2)")
ALKYNE_TERMINAL: Sequence[BandRow] = (
    (3300, 30, 50, 20, 20, 10, "C-H stretch (sp)"),
    (2120, 40, 70, 20, 15, 10, "C#C stretch"),
)
ALKYNE_INTERNAL: BandRow = (2200, 60, 85, 10, 15, 10, "C#C stretch (Internal)")
ESTER: Sequence[BandRow] = (
    (1740, 20, 10, 15, 20, 10, "C=O stretch (Ester)"),
    (1180, 100, 20, 30, 30, 20, "C-O stretch (Ester)"),
)
AMIDE_I: BandRow = (1660, 30, 15, 20, 30, 15, "C=O stretch (Amide I)")
AMIDE_II: BandRow = (1550, 50, 40, 30, 30, 20, "N-H bend (Amide II)")
KETONE: BandRow = (1715, 25, 10, 15, 20, 10, "C=O stretch (Ketone/Aldehyde)")
ALDEHYDE_CH: Sequence[BandRow] = (
    (2720, 20, 70, 15, 15, 5, "C-H stretch (Aldehyde)"),
    (2820, 20, 75, 15, 15, 5, "C-H stretch (Aldehyde)"),
)
ALKENE: Sequence[BandRow] = (
    (1650, 30, 65, 25, 15, 10, "C=C stretch (Alkene)"),
    (910, 80, 40, 30, 20, 15, "C-H oop bend (Alkene)"),
)
AROMATIC: Sequence[BandRow] = (
    (1600, 15, 60, 25, 15, 10, "C=C stretch (Aromatic)"),
    (1475, 50, 55, 30, 20, 15, "C=C stretch (Aromatic)"),
    (730, 100, 30, 30, 25, 15, "C-H oop bend (Aromatic)"),
)
CO_SINGLE: BandRow = (1100, 150, 35, 40, 40, 30, "C-O stretch")
NITRILE: BandRow = (2250, 20, 50, 30, 15, 10, "C#N stretch")
FINGERPRINT_LABEL = "Fingerprint region"


def _band(row: BandRow, rng: np.random.Generator) -> PeakSpec:
    center, c_span, target, t_span, width, w_span, label = row
    return PeakSpec(
        center=center + rng.random() * c_span,
        target=target + rng.random() * t_span,
        width=width + rng.random() * w_span,
        label=label,
    )


def characteristic_specs(flags: FeatureFlags, descriptor: str, rng: np.random.Generator) -> List[PeakSpec]:
    """Bands implied by the functional group flags, without fingerprint scatter."""

    rows: List[BandRow] = []
    if flags.has_oh:
        rows.append(OH_ALCOHOL)
    if flags.has_cooh:
        rows.extend((OH_ACID, CO_ACID))
    if flags.has_nh:
        rows.append(NH_AMINE)
        # unsubstituted nitrogen reads as a primary amine doublet
        if "N(" not in descriptor:
            rows.append(NH_AMINE_2)
    if flags.has_amide_nh:
        rows.append(NH_AMIDE)
    # unrecognized descriptors still get the generic C-H bands
    if flags.has_sp3_ch or (descriptor and not flags.has_any()):
        rows.extend(CH_SP3)
    if flags.has_sp2_ch:
        rows.append(CH_SP2)
    if flags.has_alkyne and "C#N" not in descriptor:
        rows.extend(ALKYNE_TERMINAL)
    elif flags.has_alkyne:
        rows.append(ALKYNE_INTERNAL)
    if flags.has_ester and not flags.has_cooh:
        rows.extend(ESTER)
    if flags.has_amide:
        rows.append(AMIDE_I)
        if flags.has_amide_nh:
            rows.append(AMIDE_II)
    if flags.has_ketone_aldehyde:
        rows.append(KETONE)
        if is_aldehyde(descriptor):
            rows.extend(ALDEHYDE_CH)
    if flags.has_alkene:
        rows.extend(ALKENE)
    if flags.has_aromatic:
        rows.extend(AROMATIC)

    ester_co = flags.has_ester and not flags.has_cooh
    if (flags.has_ether or (flags.has_oh and not flags.has_cooh)) and not ester_co:
        rows.append(CO_SINGLE)
    if "C#N" in descriptor:
        rows.append(NITRILE)
    return [_band(row, rng) for row in rows]


def _free_fingerprint_center(
    placed: Sequence[PeakSpec],
    rng: np.random.Generator,
    exclusions: Sequence[Tuple[float, float]],
) -> Optional[float]:
    lo, hi = FINGERPRINT_RANGE
    for _ in range(FINGERPRINT_ATTEMPTS):
        center = lo + rng.random() * (hi - lo)
        blocked = any(
            abs(p.center - center) < FINGERPRINT_CLEARANCE and p.target < STRONG_PEAK_TRANSMITTANCE
            for p in placed
        ) or any(abs(center - zone) < half for zone, half in exclusions)
        if not blocked:
            return center
    return None


def add_fingerprint_scatter(
    specs: List[PeakSpec],
    rng: np.random.Generator,
    exclusions: Sequence[Tuple[float, float]] = (),
) -> List[PeakSpec]:
    """Append 3-7 weak fingerprint bands away from strong bands.

    A candidate that falls within the clearance of a band deeper than the
    strong-peak threshold, or inside an exclusion zone, is redrawn up to
    ``FINGERPRINT_ATTEMPTS`` times. It is dropped only when the region has
    no free slot left.
    """

    out = list(specs)
    count = int(rng.integers(FINGERPRINT_COUNT[0], FINGERPRINT_COUNT[1] + 1))
    for _ in range(count):
        center = _free_fingerprint_center(out, rng, exclusions)
        if center is None:
            logger.debug("IR: no free fingerprint slot, %d bands placed", len(out) - len(specs))
            break
        out.append(
            PeakSpec(
                center=center,
                target=45 + rng.random() * 45,
                width=15 + rng.random() * 15,
                label=FINGERPRINT_LABEL,
            )
        )
    return out


def render_curve(
    specs: Sequence[PeakSpec],
    rng: np.random.Generator,
    settings: CurveSettings = IR_SETTINGS,
) -> Curve:
    """Subtract Lorentzian bands from a noisy, wavy transmittance baseline."""

    x = settings.grid()
    amp = settings.noise_amplitude
    noise = (rng.random(x.size) - 0.5) * 2 * amp
    phase = rng.random(x.size) * np.pi
    noise += np.sin(x * settings.wave_frequency + phase) * amp * settings.wave_fraction
    y = settings.baseline + noise
    for spec in specs:
        depth = max(0.0, settings.baseline - spec.target)
        y -= lorentzian(x, spec.center, spec.width, depth)
    return Curve(x, np.clip(y, settings.clamp_min, settings.clamp_max))


def _curated_specs(entry: CuratedEntry, rng: np.random.Generator) -> List[PeakSpec]:
    specs = draw_bands(entry.ir, rng)
    return add_fingerprint_scatter(specs, rng, entry.fingerprint_exclusions)


def synthesize(
    flags: FeatureFlags,
    descriptor: str,
    rng: np.random.Generator,
) -> SpectrumResult:
    """Build IR specs, render the transmittance curve and label its minima."""

    if not descriptor:
        return SpectrumResult.empty(Modality.IR)

    entry = lookup(descriptor)
    if entry is not None and entry.ir:
        logger.debug("IR: curated peak set '%s' for %r", entry.name, descriptor)
        specs = _curated_specs(entry, rng)
    else:
        specs = add_fingerprint_scatter(characteristic_specs(flags, descriptor, rng), rng)

    curve = render_curve(specs, rng)
    peaks = extract(curve, specs, Modality.IR)
    if entry is not None and entry.ir_labels:
        peaks = collapse_labels(peaks, entry.ir_labels)
    logger.debug("IR: %d specs, %d labeled peaks", len(specs), len(peaks))
    return SpectrumResult(Modality.IR, curve, peaks, specs)


__all__ = [
    "FINGERPRINT_LABEL",
    "characteristic_specs",
    "add_fingerprint_scatter",
    "render_curve",
    "synthesize",
]
