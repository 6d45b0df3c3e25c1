"""Export of synthesized spectra to JSON, CSV and NPZ."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Dict, List

import numpy as np

from .peaks import NMRResult, SpectrumResult

__all__ = ["save_result", "load_result"]

logger = logging.getLogger(__name__)


def _meta(result: SpectrumResult | NMRResult, path: Path, descriptor: str, source: str) -> Dict[str, object]:
    meta: Dict[str, object] = {
        "filename": path.name,
        "timestamp": time.time(),
        "descriptor": descriptor,
        "modality": result.modality.value,
        "source": source,
    }
    if isinstance(result, NMRResult):
        meta["nucleus"] = result.nucleus.value
    return meta


def _nmr_rows(result: NMRResult) -> List[str]:
    rows = ["shift,intensity,multiplicity,coupling,label"]
    for p in result.peaks:
        coupling = "" if p.coupling is None else f"{p.coupling:.3f}"
        label = p.label.replace('"', "'")
        rows.append(f'{p.shift:.4f},{p.intensity:.4f},{p.multiplicity},{coupling},"{label}"')
    return rows


def _save_csv(path: Path, result: SpectrumResult | NMRResult) -> None:
    if isinstance(result, NMRResult):
        path.write_text("\n".join(_nmr_rows(result)) + "\n", encoding="utf8")
        return
    settings = result.settings
    data = np.column_stack([result.curve.axis, result.curve.response])
    header = f"{settings.axis_name},{settings.response_name}"
    np.savetxt(path, data, delimiter=",", header=header, comments="", fmt="%.6g")


def _save_npz(path: Path, result: SpectrumResult | NMRResult, meta: Dict[str, object]) -> None:
    payload = result.to_dict()
    if isinstance(result, NMRResult):
        np.savez_compressed(
            path,
            shift=np.array([p.shift for p in result.peaks], dtype=float),
            intensity=np.array([p.intensity for p in result.peaks], dtype=float),
            peaks=json.dumps(payload["peaks"], ensure_ascii=False),
            meta=json.dumps(meta),
        )
        return
    np.savez_compressed(
        path,
        axis=np.asarray(result.curve.axis, dtype=float),
        response=np.asarray(result.curve.response, dtype=float),
        peaks=json.dumps(payload["peaks"], ensure_ascii=False),
        meta=json.dumps(meta),
    )


def save_result(
    path: str | Path,
    result: SpectrumResult | NMRResult,
    *,
    descriptor: str = "",
    source: str = "specsynth",
) -> Path:
    """Write ``result`` to ``path``; the suffix selects the format."""

    p = Path(path)
    suffix = p.suffix.lower()
    if suffix not in (".json", ".csv", ".npz"):
        raise ValueError(f"Unsupported file format: {p.suffix}")
    p.parent.mkdir(parents=True, exist_ok=True)
    meta = _meta(result, p, descriptor, source)

    if suffix == ".json":
        data = result.to_dict()
        data["meta"] = meta
        with p.open("w", encoding="utf8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False)
    elif suffix == ".csv":
        _save_csv(p, result)
    else:
        _save_npz(p, result, meta)
    logger.info("Saved %s result to %s", result.modality.value, p)
    return p


def load_result(path: str | Path) -> Dict[str, object]:
    """Read back a JSON or NPZ export as plain Python data."""

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    if p.suffix.lower() == ".json":
        return json.loads(p.read_text(encoding="utf8"))
    if p.suffix.lower() == ".npz":
        with np.load(p, allow_pickle=False) as data:
            out: Dict[str, object] = {
                key: np.asarray(data[key]) for key in data.files if key not in ("peaks", "meta")
            }
            out["peaks"] = json.loads(str(data["peaks"]))
            out["meta"] = json.loads(str(data["meta"]))
        return out
    raise ValueError(f"Unsupported file format: {p.suffix}")
