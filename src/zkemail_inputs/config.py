"""Circuit geometry configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

from .packing import MAX_PACK_WIDTH

BN254_FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617


@dataclass(slots=True)
class CircuitConfig:
    field_modulus: int = BN254_FIELD_MODULUS
    limb_bits: int = 121
    limb_count: int = 17
    max_sha_bytes: int = 1024
    pack_width: int = 7

    def __post_init__(self) -> None:
        if self.field_modulus <= 1:
            raise ValueError("field_modulus must be greater than 1")
        if self.limb_bits <= 0 or self.limb_count <= 0:
            raise ValueError("limb_bits and limb_count must be positive")
        if self.field_modulus.bit_length() > self.limb_bits * self.limb_count:
            raise ValueError("Limb geometry cannot hold a field element")
        if self.max_sha_bytes <= 0 or self.max_sha_bytes % 64 != 0:
            raise ValueError("max_sha_bytes must be a positive multiple of 64: the SHA-256 circuit consumes whole 512-bit blocks")
        if not (1 <= self.pack_width <= MAX_PACK_WIDTH):
            raise ValueError(f"pack_width must be in [1, {MAX_PACK_WIDTH}]")

    @property
    def max_value_bits(self) -> int:
        return self.limb_bits * self.limb_count

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def dump(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(self.to_dict(), handle, indent=2)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CircuitConfig":
        defaults = cls()
        return cls(
            field_modulus=int(raw.get("field_modulus", defaults.field_modulus)),
            limb_bits=int(raw.get("limb_bits", defaults.limb_bits)),
            limb_count=int(raw.get("limb_count", defaults.limb_count)),
            max_sha_bytes=int(raw.get("max_sha_bytes", defaults.max_sha_bytes)),
            pack_width=int(raw.get("pack_width", defaults.pack_width)),
        )

    @classmethod
    def load(cls, path: Path) -> "CircuitConfig":
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return cls.from_dict(raw)
