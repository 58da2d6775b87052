"""The ammunition record of Highfleet version 1.163."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from highfleet.ammo_v1_151 import (
    AmmoFormatError,
    _coerce_strings,
    _dump_json,
    _Kind,
    _load_json,
    _read_fields,
    _write_fields,
)
from highfleet.escadra_string import EscadraString

__all__ = ["Ammo", "AmmoFormatError"]

_SCHEMA: tuple[tuple[str, _Kind], ...] = (
    ("reticle", _Kind.I32),
    ("padding_4h", _Kind.U32),
    ("item_name", _Kind.STRING),
    ("shell_kind", _Kind.STRING),
    ("shell_kind2", _Kind.STRING),
    ("milimeterage", _Kind.STRING),
    ("magazine_image", _Kind.STRING),
    ("sign_ammo", _Kind.STRING),
    ("bullet_height", _Kind.F32),
    ("padding_cch", _Kind.U32),
    ("shell_in", _Kind.STRING),
    ("shell_out", _Kind.STRING),
    ("shell_enemy", _Kind.STRING),
    ("shell_far", _Kind.STRING),
    ("caliber", _Kind.I32),
    ("index", _Kind.I32),
    ("speed", _Kind.F32),
    ("ap_drag", _Kind.F32),
    ("explosive_power", _Kind.F32),
    ("penetrative_power", _Kind.F32),
    ("incendiary_power", _Kind.F32),
    ("ttl", _Kind.F32),
    ("shop_price", _Kind.I32),
    ("shop_rarity", _Kind.F32),
    ("shop_ammount", _Kind.F32),
    ("fire_delay", _Kind.F32),
    ("unknown_180h", _Kind.I32),
    ("padding_184h", _Kind.U32),
)

# Older names of fields whose purpose has since been identified.
_ALIASES: dict[str, tuple[str, ...]] = {
    "ttl": ("unknown_16ch",),
    "shop_rarity": ("unknown_174h",),
    "shop_ammount": ("unknown_178h",),
    "fire_delay": ("unknown_17ch",),
}


@dataclass
class Ammo:
    """An ammunition type as stored by the game.

    Compared with version 1.151 this adds the enemy firing sound set and
    the shell lifetime and shop stock fields. When reading, the fields
    ``ttl``, ``shop_rarity``, ``shop_ammount`` and ``fire_delay`` also
    accept their older ``unknown_*`` names.
    """

    reticle: int = 0
    padding_4h: int = 0
    item_name: EscadraString = field(default_factory=EscadraString)
    shell_kind: EscadraString = field(default_factory=EscadraString)
    shell_kind2: EscadraString = field(default_factory=EscadraString)
    milimeterage: EscadraString = field(default_factory=EscadraString)
    magazine_image: EscadraString = field(default_factory=EscadraString)
    sign_ammo: EscadraString = field(default_factory=EscadraString)
    bullet_height: float = 0.0
    padding_cch: int = 0
    shell_in: EscadraString = field(default_factory=EscadraString)
    shell_out: EscadraString = field(default_factory=EscadraString)
    shell_enemy: EscadraString = field(default_factory=EscadraString)
    shell_far: EscadraString = field(default_factory=EscadraString)
    caliber: int = 0
    index: int = 0
    speed: float = 0.0
    ap_drag: float = 0.0
    explosive_power: float = 0.0
    penetrative_power: float = 0.0
    incendiary_power: float = 0.0
    ttl: float = 0.0
    shop_price: int = 0
    shop_rarity: float = 0.0
    shop_ammount: float = 0.0
    fire_delay: float = 0.0
    unknown_180h: int = 0
    padding_184h: int = 0

    def __post_init__(self) -> None:
        _coerce_strings(_SCHEMA, self)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of every field, strings as ``str``, in record order."""
        return _write_fields(_SCHEMA, self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Ammo:
        """Build a record from a mapping; every field is required."""
        return cls(**_read_fields(_SCHEMA, data, _ALIASES))

    def to_json(self) -> str:
        """Compact JSON text of the record."""
        return _dump_json(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes) -> Ammo:
        """Parse a record from JSON text."""
        return cls.from_dict(_load_json(text))