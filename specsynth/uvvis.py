"""UV-Vis strategy: electronic transitions rendered as Gaussian bands."""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from .config import UV_SETTINGS, CurveSettings, Modality
from .features import FeatureFlags
from .lineshapes import gaussian
from .peaks import Curve, PeakSpec, SpectrumResult, extract

logger = logging.getLogger(__name__)

AROMATIC_B = "π→π* (aromatic, B band)"
AROMATIC_E = "π→π* (aromatic, E band)"
CARBONYL_N = "n→π* (carbonyl)"
ESTER_PI = "π→π* (ester)"
AMIDE_PI = "π→π* (amide)"
ALKENE_PI = "π→π* (alkene)"


def _transition(
    rng: np.random.Generator,
    lambda_max: float,
    lambda_span: float,
    intensity: float,
    intensity_span: float,
    width: float,
    width_span: float,
    label: str,
) -> PeakSpec:
    return PeakSpec(
        center=lambda_max + rng.random() * lambda_span,
        target=intensity + rng.random() * intensity_span,
        width=width + rng.random() * width_span,
        label=label,
    )


def transition_specs(flags: FeatureFlags, rng: np.random.Generator) -> List[PeakSpec]:
    specs: List[PeakSpec] = []
    if flags.has_aromatic:
        specs.append(_transition(rng, 255, 15, 0.6, 0.4, 15, 10, AROMATIC_B))
        specs.append(_transition(rng, 205, 15, 0.8, 0.5, 12, 8, AROMATIC_E))
    if flags.has_carbonyl:
        specs.append(_transition(rng, 270, 30, 0.1, 0.2, 20, 10, CARBONYL_N))
    if flags.has_ester:
        specs.append(_transition(rng, 205, 10, 0.3, 0.2, 15, 5, ESTER_PI))
    if flags.has_amide:
        specs.append(_transition(rng, 210, 15, 0.4, 0.3, 18, 7, AMIDE_PI))
    if flags.has_alkene:
        # usually below 200 nm, only the red tail reaches the window
        specs.append(_transition(rng, 195, 15, 0.7, 0.4, 10, 5, ALKENE_PI))
    return specs


def render_curve(
    specs: Sequence[PeakSpec],
    rng: np.random.Generator,
    settings: CurveSettings = UV_SETTINGS,
) -> Curve:
    x = settings.grid()
    y = settings.baseline + (rng.random(x.size) - 0.5) * 2 * settings.noise_amplitude
    for spec in specs:
        y += gaussian(x, spec.center, spec.width, spec.target)
    return Curve(x, np.clip(y, settings.clamp_min, settings.clamp_max))


def synthesize(
    flags: FeatureFlags,
    descriptor: str,
    rng: np.random.Generator,
) -> SpectrumResult:
    if not descriptor:
        return SpectrumResult.empty(Modality.UV_VIS)
    specs = transition_specs(flags, rng)
    curve = render_curve(specs, rng)
    peaks = extract(curve, specs, Modality.UV_VIS)
    logger.debug("UV-Vis: %d transitions, %d maxima", len(specs), len(peaks))
    return SpectrumResult(Modality.UV_VIS, curve, peaks, specs)


__all__ = [
    "AROMATIC_B",
    "AROMATIC_E",
    "CARBONYL_N",
    "ESTER_PI",
    "AMIDE_PI",
    "ALKENE_PI",
    "transition_specs",
    "render_curve",
    "synthesize",
]
