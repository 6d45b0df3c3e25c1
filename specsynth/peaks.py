"""Peak records, sampled curves and curve-based peak extraction."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np
from scipy.signal import argrelmax

from .config import IR_SETTINGS, UV_SETTINGS, CurveSettings, Modality, Nucleus


GENERIC_TRANSITION = "Electronic transition"


@dataclass(frozen=True, slots=True)
class PeakSpec:
    """A proposed spectral feature before rendering.

    ``target`` is the minimum transmittance for IR and the added absorbance
    for UV-Vis.
    """

    center: float
    target: float
    width: float
    label: str


@dataclass(frozen=True, slots=True)
class LabeledPeak:
    position: float
    response: float
    label: str


@dataclass(frozen=True, slots=True)
class NMRPeak:
    shift: float
    intensity: float
    multiplicity: str
    label: str
    coupling: float | None = None
    atom_ids: Tuple[int, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["atom_ids"] = list(self.atom_ids)
        return data


@dataclass(frozen=True, eq=False)
class Curve:
    """Fixed-step samples ``(axis[i], response[i])``; read-only."""

    axis: np.ndarray
    response: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        axis = np.array(self.axis, dtype=float)
        response = np.array(self.response, dtype=float)
        if axis.shape != response.shape or axis.ndim != 1:
            raise ValueError("Curve axis and response must be 1-D arrays of equal size")
        axis.setflags(write=False)
        response.setflags(write=False)
        object.__setattr__(self, "axis", axis)
        object.__setattr__(self, "response", response)

    @classmethod
    def empty(cls) -> "Curve":
        return cls(np.empty(0), np.empty(0))

    def __len__(self) -> int:
        return int(self.axis.size)


@dataclass(frozen=True, eq=False)
class SpectrumResult:
    """Curve plus labeled peaks for a curve-bearing modality."""

    modality: Modality
    curve: Curve
    peaks: List[LabeledPeak]
    specs: List[PeakSpec] = field(default_factory=list, repr=False)

    @classmethod
    def empty(cls, modality: Modality) -> "SpectrumResult":
        return cls(modality, Curve.empty(), [])

    @property
    def settings(self) -> CurveSettings:
        return UV_SETTINGS if self.modality is Modality.UV_VIS else IR_SETTINGS

    def to_dict(self) -> Dict[str, object]:
        axis_name = self.settings.axis_name
        response_name = self.settings.response_name
        peaks = []
        for p in self.peaks:
            entry: Dict[str, object] = {axis_name: p.position, response_name: p.response, "label": p.label}
            if self.modality is Modality.UV_VIS:
                entry["transition"] = p.label
            peaks.append(entry)
        return {
            "modality": self.modality.value,
            "curve": {axis_name: self.curve.axis.tolist(), response_name: self.curve.response.tolist()},
            "peaks": peaks,
        }


@dataclass(frozen=True)
class NMRResult:
    """Peak list of an NMR synthesis, highest shift first."""

    nucleus: Nucleus
    peaks: List[NMRPeak]

    modality = Modality.NMR

    def to_dict(self) -> Dict[str, object]:
        return {"modality": "NMR", "nucleus": self.nucleus.value, "peaks": [p.to_dict() for p in self.peaks]}


def _dedupe(
    candidates: Sequence[LabeledPeak],
    distance: float,
    *,
    same_label: bool,
) -> List[LabeledPeak]:
    kept: List[LabeledPeak] = []
    for peak in candidates:
        clash = any(
            abs(k.position - peak.position) < distance
            and (not same_label or k.label == peak.label)
            for k in kept
        )
        if not clash:
            kept.append(peak)
    return kept


def extract_ir_peaks(
    curve: Curve,
    specs: Sequence[PeakSpec],
    settings: CurveSettings = IR_SETTINGS,
) -> List[LabeledPeak]:
    """Recover labeled transmittance minima near each spec center.

    Each spec is searched within ``max(5, width / 3)`` of its center. Specs
    sharing a label and a rounded center share one tracked minimum. Minima
    that do not clear the noise threshold are dropped, then peaks with the
    same label closer than the dedup distance collapse to the first one.
    """

    if not len(curve) or not specs:
        return []
    x, y = curve.axis, curve.response
    minima: Dict[Tuple[str, int], Tuple[float, float]] = {}
    for spec in specs:
        window = max(5.0, spec.width / 3.0)
        idx = np.flatnonzero(np.abs(x - spec.center) < window)
        if idx.size == 0:
            continue
        best = idx[np.argmin(y[idx])]
        key = (spec.label, int(round(spec.center)))
        current = minima.get(key)
        if current is None or y[best] < current[1]:
            minima[key] = (float(x[best]), float(y[best]))

    threshold = settings.baseline - settings.threshold_offset
    candidates = sorted(
        (
            LabeledPeak(pos, resp, label)
            for (label, _), (pos, resp) in minima.items()
            if resp < threshold
        ),
        key=lambda p: p.position,
    )
    return _dedupe(candidates, settings.dedup_distance, same_label=True)


def _closest_label(position: float, specs: Sequence[PeakSpec]) -> str:
    label = GENERIC_TRANSITION
    best = np.inf
    for spec in specs:
        dist = abs(position - spec.center)
        if dist < best and dist < spec.width * 2:
            best = dist
            label = spec.label
    return label


def extract_uv_peaks(
    curve: Curve,
    specs: Sequence[PeakSpec],
    settings: CurveSettings = UV_SETTINGS,
) -> List[LabeledPeak]:
    """Label the local absorbance maxima that rise above the noise."""

    if len(curve) < 3:
        return []
    x, y = curve.axis, curve.response
    threshold = settings.baseline + settings.threshold_offset
    (maxima,) = argrelmax(y)
    peaks: List[LabeledPeak] = []
    for i in maxima[y[maxima] > threshold]:
        peak = LabeledPeak(float(x[i]), float(y[i]), _closest_label(float(x[i]), specs))
        if any(abs(p.position - peak.position) < settings.dedup_distance for p in peaks):
            continue
        peaks.append(peak)
    peaks.sort(key=lambda p: p.position)
    return peaks


_EXTRACTORS = {
    Modality.IR: extract_ir_peaks,
    Modality.UV_VIS: extract_uv_peaks,
}


def extract(curve: Curve, specs: Sequence[PeakSpec], modality: Modality | str) -> List[LabeledPeak]:
    """Extract labeled peaks from an IR or UV-Vis curve."""

    modality = Modality.parse(modality)
    func = _EXTRACTORS.get(modality)
    if func is None:
        raise ValueError(f"No curve-based extraction for modality '{modality.value}'")
    return func(curve, specs)


def collapse_labels(peaks: Sequence[LabeledPeak], label_map: Mapping[str, str]) -> List[LabeledPeak]:
    """Rename peaks through ``label_map`` and keep the first peak per label.

    Keys of ``label_map`` are matched as substrings, in mapping order.
    """

    seen: set[str] = set()
    out: List[LabeledPeak] = []
    for peak in sorted(peaks, key=lambda p: p.position):
        label = peak.label
        for needle, short in label_map.items():
            if needle in label:
                label = short
                break
        if label in seen:
            continue
        seen.add(label)
        out.append(LabeledPeak(peak.position, peak.response, label))
    return out


__all__ = [
    "GENERIC_TRANSITION",
    "PeakSpec",
    "LabeledPeak",
    "NMRPeak",
    "Curve",
    "SpectrumResult",
    "NMRResult",
    "extract_ir_peaks",
    "extract_uv_peaks",
    "extract",
    "collapse_labels",
]
