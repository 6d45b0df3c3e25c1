"""Functional group flags detected from a line-notation descriptor.

Detection is a set of substring and small regular expression checks over
the raw string. Nothing is parsed into atoms or bonds, so the flags are
heuristics: they can disagree with the real chemistry, and some checks
adjust others (an acid hides the plain hydroxyl flag, an amide hides the
plain amine flag) so that one textual motif is not counted twice.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Protocol


_OH_RE = re.compile(r"O(?![(=]|\w?C=O|\w?O\w)")
_NH_RE = re.compile(r"N(?!\(?=|[#C])")
_ETHER_RE = re.compile(r"C(?!=\S)O(?!=\S)C")
_AROMATIC_RE = re.compile(r"[a-z]")
_RING_RE = re.compile(r"c1.*c1")
_SP3_RE = re.compile(r"C(?![=a-z#])")


@dataclass(frozen=True, slots=True)
class FeatureFlags:
    has_oh: bool = False
    has_cooh: bool = False
    has_nh: bool = False
    has_amide_nh: bool = False
    has_carbonyl: bool = False
    has_ketone_aldehyde: bool = False
    has_ester: bool = False
    has_amide: bool = False
    has_ether: bool = False
    has_alkene: bool = False
    has_alkyne: bool = False
    has_aromatic: bool = False
    has_sp3_ch: bool = False
    has_sp2_ch: bool = False

    def has_any(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))


class FeatureDetector(Protocol):
    """Anything able to turn a descriptor into :class:`FeatureFlags`."""

    def detect(self, descriptor: str) -> FeatureFlags:
        ...


class SmilesPatternDetector:
    """Pattern heuristics for SMILES-like strings."""

    def detect(self, descriptor: str) -> FeatureFlags:
        smiles = descriptor or ""
        if not smiles:
            return FeatureFlags()

        has_carbonyl = "C=O" in smiles or "C(=O)" in smiles
        # also true for acids, which share the C(=O)O motif
        has_ester = "C(=O)O" in smiles or "OC=O" in smiles
        has_amide = "C(=O)N" in smiles or "NC=O" in smiles
        has_cooh = "C(=O)O" in smiles and ("(=O)OH" in smiles or "O=CO" in smiles)

        has_oh = bool(_OH_RE.search(smiles)) or smiles.endswith("OH")
        if has_cooh:
            has_oh = False

        has_nh = bool(_NH_RE.search(smiles))
        has_amide_nh = False
        if has_amide:
            has_amide_nh = has_nh
            has_nh = False

        has_ketone_aldehyde = has_carbonyl and not (has_ester or has_amide or has_cooh)
        has_ether = bool(_ETHER_RE.search(smiles)) or "cOc" in smiles
        has_alkene = "C=C" in smiles
        has_alkyne = "C#C" in smiles
        has_aromatic = (
            bool(_AROMATIC_RE.search(smiles))
            or bool(_RING_RE.search(smiles))
            or "C1=CC=CC=C1" in smiles
        )
        has_sp3_ch = bool(_SP3_RE.search(smiles)) or "CH" in smiles or "C" in smiles

        return FeatureFlags(
            has_oh=has_oh,
            has_cooh=has_cooh,
            has_nh=has_nh,
            has_amide_nh=has_amide_nh,
            has_carbonyl=has_carbonyl,
            has_ketone_aldehyde=has_ketone_aldehyde,
            has_ester=has_ester,
            has_amide=has_amide,
            has_ether=has_ether,
            has_alkene=has_alkene,
            has_alkyne=has_alkyne,
            has_aromatic=has_aromatic,
            has_sp3_ch=has_sp3_ch,
            has_sp2_ch=has_alkene or has_aromatic,
        )


DEFAULT_DETECTOR = SmilesPatternDetector()


def detect(descriptor: str | None) -> FeatureFlags:
    """Detect functional groups with the default pattern detector."""

    return DEFAULT_DETECTOR.detect(descriptor or "")


def is_aldehyde(descriptor: str) -> bool:
    return "C(=O)H" in descriptor or "C=O)H" in descriptor


__all__ = [
    "FeatureFlags",
    "FeatureDetector",
    "SmilesPatternDetector",
    "DEFAULT_DETECTOR",
    "detect",
    "is_aldehyde",
]
