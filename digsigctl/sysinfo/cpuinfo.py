"""Information about the system's CPU."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

PROC_CPUINFO = "/proc/cpuinfo"

# Non-exhaustive list of Intel Bay Trail CPU models.
BAY_TRAIL_CPUS = (
    "A1020", "E3805", "E3815", "E3825", "E3826", "E3827", "E3845", "J1750", "J1800", "J1850",
    "J1900", "J2850", "J2900", "N2805", "N2806", "N2807", "N2808", "N2810", "N2815", "N2820",
    "N2830", "N2840", "N2910", "N2920", "N2930", "N2940", "N3510", "N3520", "N3530", "N3540",
    "Z3735D", "Z3735E", "Z3735F", "Z3735G", "Z3736F", "Z3736G", "Z3740", "Z3740D", "Z3745",
    "Z3745D", "Z3770", "Z3770D", "Z3775", "Z3775D", "Z3785", "Z3795",
)


def _processor_blocks(text: str):
    block: list[str] = []
    for line in text.splitlines():
        if line.strip():
            block.append(line)
        elif block:
            yield block
            block = []
    if block:
        yield block


def _model_name(block: list[str]) -> Optional[str]:
    for line in block:
        key, sep, value = line.partition(":")
        if sep and key.strip() == "model name":
            return value.strip()
    return None


@dataclass(frozen=True)
class CpuInfo:
    """Summary of the CPU the system runs on."""

    is_bay_trail: bool
    model_name: Optional[str] = None

    @classmethod
    def from_text(cls, text: str) -> "CpuInfo":
        """Build the summary from the contents of ``/proc/cpuinfo``."""
        models = [_model_name(block) for block in _processor_blocks(text)]
        is_bay_trail = any(
            model is not None and any(cpu in model for cpu in BAY_TRAIL_CPUS)
            for model in models
        )
        return cls(is_bay_trail, models[0] if models else None)

    @classmethod
    def read(cls) -> "CpuInfo":
        """Read ``/proc/cpuinfo``; raises ``OSError`` if it cannot be read."""
        return cls.from_text(Path(PROC_CPUINFO).read_text(encoding="utf-8"))

    def to_dict(self) -> dict[str, Any]:
        """Return the summary as a JSON-ready mapping."""
        return {"is_bay_trail": self.is_bay_trail, "model_name": self.model_name}