import numpy as np
import pytest

from specsynth import Modality, Nucleus, synthesize
from specsynth.config import IR_SETTINGS, UV_SETTINGS
from specsynth.engine import make_rng, simulate_ir, simulate_nmr, simulate_uv
from specsynth.features import FeatureFlags
from specsynth.peaks import NMRResult, SpectrumResult

DESCRIPTORS = [
    "CCO",
    "CC(=O)C",
    "C1=CC=CC=C1",
    "c1ccccc1",
    "CC(=O)OH",
    "CC(=O)N",
    "CC#N",
    "C#CC",
    "CC(=O)OC1=CC=CC=C1C(=O)O",
    "CN1C=NC2=C1C(=O)N(C)C(=O)N2C",
    "C([C@@H]1[C@H]([C@@H]([C@H](C(O1)O)O)O)O)O",
    "CNCC(C1=CC(=C(C=C1)O)O)O",
    "I",
    "((((",
    "not a molecule",
]


def _assert_no_close_duplicates(peaks, distance: float) -> None:
    for i, a in enumerate(peaks):
        for b in peaks[i + 1:]:
            assert not (a.label == b.label and abs(a.position - b.position) < distance)


@pytest.mark.parametrize("descriptor", DESCRIPTORS)
@pytest.mark.parametrize("seed", [0, 1])
def test_ir_invariants(descriptor: str, seed: int) -> None:
    result = synthesize(descriptor, "IR", rng=seed)
    assert isinstance(result, SpectrumResult)
    assert len(result.curve) == IR_SETTINGS.n_points
    assert result.curve.response.min() >= 0.1
    assert result.curve.response.max() <= 100.0
    positions = [p.position for p in result.peaks]
    assert positions == sorted(positions)
    _assert_no_close_duplicates(result.peaks, IR_SETTINGS.dedup_distance)


@pytest.mark.parametrize("descriptor", DESCRIPTORS)
@pytest.mark.parametrize("seed", [0, 1])
def test_uv_invariants(descriptor: str, seed: int) -> None:
    result = synthesize(descriptor, Modality.UV_VIS, rng=seed)
    assert len(result.curve) == UV_SETTINGS.n_points
    assert result.curve.response.min() >= 0.0
    positions = [p.position for p in result.peaks]
    assert positions == sorted(positions)
    for i, a in enumerate(result.peaks):
        for b in result.peaks[i + 1:]:
            assert abs(a.position - b.position) >= UV_SETTINGS.dedup_distance


@pytest.mark.parametrize("descriptor", DESCRIPTORS)
@pytest.mark.parametrize("nucleus", ["1H", "13C"])
def test_nmr_sorted_descending(descriptor: str, nucleus: str) -> None:
    result = synthesize(descriptor, "NMR", nucleus, rng=0)
    assert isinstance(result, NMRResult)
    shifts = [p.shift for p in result.peaks]
    assert shifts == sorted(shifts, reverse=True)


@pytest.mark.parametrize("modality", ["IR", "UV-VIS", "NMR"])
def test_empty_descriptor_gives_empty_result(modality: str) -> None:
    for descriptor in ("", None):
        result = synthesize(descriptor, modality, rng=0)
        assert result.peaks == []
        if isinstance(result, SpectrumResult):
            assert len(result.curve) == 0


def test_modality_and_nucleus_parsing() -> None:
    assert synthesize("CCO", "uv", rng=0).modality is Modality.UV_VIS
    assert synthesize("CCO", "UV-Vis", rng=0).modality is Modality.UV_VIS
    assert synthesize("CCO", Modality.NMR, rng=0).nucleus is Nucleus.H1
    assert synthesize("CCO", "nmr", "13c", rng=0).nucleus is Nucleus.C13
    with pytest.raises(ValueError, match="modality"):
        synthesize("CCO", "raman")
    with pytest.raises(ValueError, match="nucleus"):
        synthesize("CCO", "NMR", "15N")


def test_seed_makes_output_reproducible() -> None:
    a = simulate_ir("CCO", rng=42)
    b = simulate_ir("CCO", rng=42)
    assert np.array_equal(a.curve.response, b.curve.response)
    assert a.peaks == b.peaks
    c = simulate_ir("CCO", rng=43)
    assert not np.array_equal(a.curve.response, c.curve.response)


def test_generator_is_used_as_given() -> None:
    gen = np.random.default_rng(0)
    assert make_rng(gen) is gen
    simulate_uv("c1ccccc1", rng=gen)
    assert gen.bit_generator.state != np.random.default_rng(0).bit_generator.state


def test_acetone_scenarios() -> None:
    ir = simulate_ir("CC(=O)C", rng=7)
    assert any(p.label == "C=O" and 1695 <= p.position <= 1735 and p.response < 15 for p in ir.peaks)
    h1 = simulate_nmr("CC(=O)C", "1H", rng=7)
    assert [(p.label, p.multiplicity) for p in h1.peaks] == [("CH3", "s")]
    assert 2.0 <= h1.peaks[0].shift <= 2.2


class _AromaticOnly:
    def detect(self, descriptor: str) -> FeatureFlags:
        return FeatureFlags(has_aromatic=True, has_sp2_ch=True)


def test_detector_is_swappable() -> None:
    result = synthesize("X", "UV-VIS", rng=0, detector=_AromaticOnly())
    assert any("aromatic" in s.label for s in result.specs)
    assert any("aromatic" in p.label for p in result.peaks)


def test_results_serialise_to_plain_data() -> None:
    uv = simulate_uv("c1ccccc1", rng=0).to_dict()
    assert uv["modality"] == "UV-VIS"
    assert len(uv["curve"]["wavelength"]) == UV_SETTINGS.n_points
    assert all(p["transition"] == p["label"] for p in uv["peaks"])
    nmr = simulate_nmr("CCO", "13C", rng=0).to_dict()
    assert nmr["nucleus"] == "13C"
    assert isinstance(nmr["peaks"][0]["atom_ids"], list)
