"""Fixed axis windows and noise presets for each modality."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

import numpy as np


class Modality(str, Enum):
    IR = "IR"
    UV_VIS = "UV-VIS"
    NMR = "NMR"

    @classmethod
    def parse(cls, value: "Modality | str") -> "Modality":
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        key = _MODALITY_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unsupported modality '{value}'") from None


class Nucleus(str, Enum):
    H1 = "1H"
    C13 = "13C"

    @classmethod
    def parse(cls, value: "Nucleus | str | None") -> "Nucleus":
        if value is None:
            return cls.H1
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        key = _NUCLEUS_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unsupported nucleus '{value}'") from None


_MODALITY_ALIASES = {"UV": "UV-VIS", "UVVIS": "UV-VIS", "UV_VIS": "UV-VIS"}
_NUCLEUS_ALIASES = {"H": "1H", "H1": "1H", "C": "13C", "C13": "13C"}


@dataclass(frozen=True)
class CurveSettings:
    """Sampling grid and noise model of a curve-bearing modality."""

    axis_min: float
    axis_max: float
    step: float
    baseline: float
    noise_amplitude: float
    clamp_min: float
    clamp_max: float
    significance: float
    dedup_distance: float
    axis_name: str
    response_name: str
    wave_frequency: float = 0.0
    wave_fraction: float = 0.0

    @property
    def n_points(self) -> int:
        return int(round((self.axis_max - self.axis_min) / self.step)) + 1

    def grid(self) -> np.ndarray:
        """Return the sampling axis, identical for every call."""

        return np.linspace(self.axis_min, self.axis_max, self.n_points)

    @property
    def threshold_offset(self) -> float:
        return self.noise_amplitude * self.significance


@dataclass(frozen=True)
class EnvelopeSettings:
    """Display window used when an NMR peak list is drawn as a curve."""

    shift_max: float
    shift_min: float
    half_width: float
    resolution: int = 1000
    ceiling: float = 1.0


IR_SETTINGS = CurveSettings(
    axis_min=400.0,
    axis_max=4000.0,
    step=0.5,
    baseline=98.0,
    noise_amplitude=0.8,
    clamp_min=0.1,
    clamp_max=100.0,
    significance=2.5,
    dedup_distance=15.0,
    axis_name="wavenumber",
    response_name="transmittance",
    wave_frequency=0.08,
    wave_fraction=0.4,
)

UV_SETTINGS = CurveSettings(
    axis_min=200.0,
    axis_max=800.0,
    step=0.5,
    baseline=0.03,
    noise_amplitude=0.005,
    clamp_min=0.0,
    clamp_max=np.inf,
    significance=3.0,
    dedup_distance=10.0,
    axis_name="wavelength",
    response_name="absorbance",
)

NMR_ENVELOPES: Dict[str, EnvelopeSettings] = {
    "1H": EnvelopeSettings(shift_max=12.0, shift_min=0.0, half_width=0.05),
    "13C": EnvelopeSettings(shift_max=220.0, shift_min=0.0, half_width=1.0),
}

# Fingerprint scatter placement in the IR strategy.
FINGERPRINT_RANGE = (600.0, 1350.0)
FINGERPRINT_COUNT = (3, 7)
FINGERPRINT_CLEARANCE = 40.0
FINGERPRINT_ATTEMPTS = 50
STRONG_PEAK_TRANSMITTANCE = 50.0


__all__ = [
    "Modality",
    "Nucleus",
    "CurveSettings",
    "EnvelopeSettings",
    "IR_SETTINGS",
    "UV_SETTINGS",
    "NMR_ENVELOPES",
    "FINGERPRINT_RANGE",
    "FINGERPRINT_COUNT",
    "FINGERPRINT_CLEARANCE",
    "FINGERPRINT_ATTEMPTS",
    "STRONG_PEAK_TRANSMITTANCE",
]
