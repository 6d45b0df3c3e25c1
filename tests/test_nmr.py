import numpy as np
import pytest

from specsynth import nmr
from specsynth.config import Nucleus
from specsynth.features import detect
from specsynth.peaks import NMRPeak


@pytest.mark.parametrize("seed", range(5))
def test_acetone_proton_override(seed: int) -> None:
    result = nmr.synthesize(detect("CC(=O)C"), "CC(=O)C", np.random.default_rng(seed), Nucleus.H1)
    assert len(result.peaks) == 1
    peak = result.peaks[0]
    assert peak.label == "CH3"
    assert 2.0 <= peak.shift <= 2.2
    assert peak.multiplicity == "s"
    assert peak.atom_ids == (1, 2)


def test_acetone_carbon_override() -> None:
    result = nmr.synthesize(detect("CC(=O)C"), "CC(=O)C", np.random.default_rng(0), Nucleus.C13)
    assert [p.label for p in result.peaks] == ["C=O", "CH3"]
    assert 205 <= result.peaks[0].shift <= 207
    assert 29.5 <= result.peaks[1].shift <= 30.5


def test_ester_carbonyl_carbon_window() -> None:
    result = nmr.synthesize(detect("CC(=O)OCC"), "CC(=O)OCC", np.random.default_rng(2), Nucleus.C13)
    carbonyl = [p for p in result.peaks if p.label.startswith("C=O")]
    assert len(carbonyl) == 1
    assert carbonyl[0].label == "C=O (Ester)"
    assert 160 <= carbonyl[0].shift <= 210
    assert all(p.multiplicity == "s" for p in result.peaks)


def test_proton_peaks_sorted_and_tagged() -> None:
    result = nmr.synthesize(detect("c1ccccc1CO"), "c1ccccc1CO", np.random.default_rng(4), Nucleus.H1)
    shifts = [p.shift for p in result.peaks]
    assert shifts == sorted(shifts, reverse=True)
    aromatic = [p for p in result.peaks if p.label == "Aromatic H"]
    assert aromatic and 6.5 <= aromatic[0].shift <= 8.5
    ids = sorted(i for p in result.peaks for i in p.atom_ids)
    assert ids == list(range(1, len(result.peaks) + 1))
    assert all(p.multiplicity in nmr.MULTIPLICITIES for p in result.peaks)


def test_empty_descriptor() -> None:
    assert nmr.synthesize(detect(""), "", np.random.default_rng(0), Nucleus.C13).peaks == []


def test_envelope_runs_high_to_low_and_is_clipped() -> None:
    peaks = [
        NMRPeak(2.1, 1.0, "s", "CH3"),
        NMRPeak(2.1, 1.0, "s", "CH3 again"),
        NMRPeak(7.3, 0.5, "m", "Aromatic H"),
    ]
    curve = nmr.render_envelope(peaks, "1H")
    assert len(curve) == 1000
    assert curve.axis[0] == 12.0
    assert np.all(np.diff(curve.axis) < 0)
    assert curve.response.max() == 1.0
    near = np.argmin(np.abs(curve.axis - 7.3))
    assert 0.4 < curve.response[near] <= 0.5 + 1e-9


def test_carbon_envelope_window() -> None:
    curve = nmr.render_envelope([], Nucleus.C13)
    assert curve.axis[0] == 220.0
    assert curve.axis[-1] > 0.0
    assert np.all(curve.response == 0.0)
