import numpy as np
import pytest

from specsynth.config import IR_SETTINGS, UV_SETTINGS, Modality
from specsynth.peaks import Curve, PeakSpec, extract


def _ir_curve() -> Curve:
    x = IR_SETTINGS.grid()
    y = np.full_like(x, 98.0) - 70 * np.exp(-((x - 1700.0) ** 2) / 50.0)
    return Curve(x, y)


def _uv_curve() -> Curve:
    x = UV_SETTINGS.grid()
    y = 0.03 + 0.6 * np.exp(-((x - 300.0) ** 2) / (2 * 8.0**2))
    return Curve(x, y)


def test_extract_dispatches_ir_minima() -> None:
    specs = [PeakSpec(1700.0, 28.0, 20.0, "C=O")]
    peaks = extract(_ir_curve(), specs, "IR")
    assert [(p.label, p.position) for p in peaks] == [("C=O", 1700.0)]
    assert peaks == extract(_ir_curve(), specs, Modality.IR)


def test_extract_dispatches_uv_maxima() -> None:
    specs = [PeakSpec(302.0, 0.6, 8.0, "pi->pi*")]
    peaks = extract(_uv_curve(), specs, "UV-VIS")
    assert [(p.label, p.position) for p in peaks] == [("pi->pi*", 300.0)]
    assert np.isclose(peaks[0].response, 0.63)


def test_extract_rejects_peak_list_modalities() -> None:
    with pytest.raises(ValueError, match="NMR"):
        extract(_ir_curve(), [], "NMR")
    with pytest.raises(ValueError, match="modality"):
        extract(_ir_curve(), [], "raman")
