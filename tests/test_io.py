from pathlib import Path

import numpy as np
import pytest

from specsynth.engine import simulate_ir, simulate_nmr, simulate_uv
from specsynth.io import load_result, save_result


def test_save_and_load_json(tmp_path: Path) -> None:
    result = simulate_ir("CCO", rng=0)
    out = save_result(tmp_path / "ethanol_ir.json", result, descriptor="CCO")
    data = load_result(out)
    assert data["meta"]["descriptor"] == "CCO"
    assert data["meta"]["modality"] == "IR"
    assert len(data["curve"]["wavenumber"]) == len(result.curve)
    assert [p["label"] for p in data["peaks"]] == [p.label for p in result.peaks]


def test_uv_csv_has_header_and_full_window(tmp_path: Path) -> None:
    result = simulate_uv("c1ccccc1", rng=0)
    out = save_result(tmp_path / "sub" / "benzene.csv", result)
    lines = out.read_text().splitlines()
    assert lines[0] == "wavelength,absorbance"
    assert len(lines) == len(result.curve) + 1
    arr = np.genfromtxt(out, delimiter=",", names=True)
    assert np.isclose(arr["wavelength"][0], 200.0)


def test_nmr_csv_and_npz(tmp_path: Path) -> None:
    result = simulate_nmr("CC(=O)C", "13C", rng=0)
    csv_lines = save_result(tmp_path / "acetone.csv", result).read_text().splitlines()
    assert csv_lines[0] == "shift,intensity,multiplicity,coupling,label"
    assert len(csv_lines) == 3
    data = load_result(save_result(tmp_path / "acetone.npz", result, descriptor="CC(=O)C"))
    assert data["meta"]["nucleus"] == "13C"
    assert np.allclose(data["shift"], [p.shift for p in result.peaks])
    assert [p["label"] for p in data["peaks"]] == ["C=O", "CH3"]


def test_ir_npz_round_trip(tmp_path: Path) -> None:
    result = simulate_ir("CC(=O)C", rng=1)
    data = load_result(save_result(tmp_path / "acetone_ir.npz", result))
    assert np.allclose(data["response"], result.curve.response)


def test_unsupported_suffix(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unsupported"):
        save_result(tmp_path / "x.txt", simulate_ir("C", rng=0))
    with pytest.raises(FileNotFoundError):
        load_result(tmp_path / "missing.json")
