"""Synthetic IR, UV-Vis and NMR spectra from line-notation descriptors."""

from .config import Modality, Nucleus, IR_SETTINGS, UV_SETTINGS
from .features import FeatureFlags, FeatureDetector, SmilesPatternDetector, detect
from .lineshapes import lorentzian, gaussian
from .peaks import (
    Curve,
    LabeledPeak,
    NMRPeak,
    NMRResult,
    PeakSpec,
    SpectrumResult,
    extract,
    extract_ir_peaks,
    extract_uv_peaks,
)
from .engine import synthesize, simulate_ir, simulate_uv, simulate_nmr
from .nmr import render_envelope
from .io import save_result, load_result

__all__ = [
    "Modality",
    "Nucleus",
    "IR_SETTINGS",
    "UV_SETTINGS",
    "FeatureFlags",
    "FeatureDetector",
    "SmilesPatternDetector",
    "detect",
    "lorentzian",
    "gaussian",
    "Curve",
    "LabeledPeak",
    "NMRPeak",
    "NMRResult",
    "PeakSpec",
    "SpectrumResult",
    "extract",
    "extract_ir_peaks",
    "extract_uv_peaks",
    "synthesize",
    "simulate_ir",
    "simulate_uv",
    "simulate_nmr",
    "render_envelope",
    "save_result",
    "load_result",
]
