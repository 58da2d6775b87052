"""The ammunition record of Highfleet version 1.151."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from highfleet.escadra_string import EscadraString


class AmmoFormatError(ValueError):
    """Raised when serialized ammo data does not describe a valid record."""


class _Kind(Enum):
    I32 = "i32"
    U32 = "u32"
    F32 = "f32"
    STRING = "string"


_INT_RANGES = {
    _Kind.I32: (-(2**31), 2**31 - 1),
    _Kind.U32: (0, 2**32 - 1),
}


def _decode_value(name: str, kind: _Kind, value: Any) -> Any:
    if kind is _Kind.STRING:
        if isinstance(value, EscadraString):
            return EscadraString(str(value))
        if not isinstance(value, str):
            raise AmmoFormatError(f"field `{name}` expects a string, got {value!r}")
        return EscadraString(value)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AmmoFormatError(f"field `{name}` expects a number, got {value!r}")
    if kind is _Kind.F32:
        return float(value)
    if not isinstance(value, int):
        raise AmmoFormatError(f"field `{name}` expects an integer, got {value!r}")
    low, high = _INT_RANGES[kind]
    if not low <= value <= high:
        raise AmmoFormatError(
            f"field `{name}` value {value} is out of range for {kind.value}"
        )
    return value


def _encode_value(kind: _Kind, value: Any) -> Any:
    if kind is _Kind.STRING:
        return str(value)
    if kind is _Kind.F32:
        return float(value)
    return int(value)


def _read_fields(
    schema: tuple[tuple[str, _Kind], ...],
    data: Any,
    aliases: Mapping[str, tuple[str, ...]] | None = None,
) -> dict[str, Any]:
    """Decode ``data`` against ``schema``; unknown keys are ignored."""
    if not isinstance(data, Mapping):
        raise AmmoFormatError(f"expected an object, got {type(data).__name__}")
    aliases = aliases or {}
    values: dict[str, Any] = {}
    for name, kind in schema:
        present = [key for key in (name, *aliases.get(name, ())) if key in data]
        if not present:
            raise AmmoFormatError(f"missing field `{name}`")
        if len(present) > 1:
            raise AmmoFormatError(f"duplicate field `{name}`")
        values[name] = _decode_value(name, kind, data[present[0]])
    return values


def _write_fields(schema: tuple[tuple[str, _Kind], ...], record: Any) -> dict[str, Any]:
    return {name: _encode_value(kind, getattr(record, name)) for name, kind in schema}


def _coerce_strings(schema: tuple[tuple[str, _Kind], ...], record: Any) -> None:
    for name, kind in schema:
        if kind is _Kind.STRING and isinstance(getattr(record, name), str):
            setattr(record, name, EscadraString(getattr(record, name)))


def _dump_json(data: dict[str, Any]) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _load_json(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise AmmoFormatError(f"invalid JSON: {error}") from error


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
    ("shell_far", _Kind.STRING),
    ("caliber", _Kind.I32),
    ("index", _Kind.I32),
    ("speed", _Kind.F32),
    ("ap_drag", _Kind.F32),
    ("explosive_power", _Kind.F32),
    ("penetrative_power", _Kind.F32),
    ("incendiary_power", _Kind.F32),
    ("shop_price", _Kind.I32),
    ("unknown_150h", _Kind.F32),
    ("unknown_154h", _Kind.F32),
    ("unknown_158h", _Kind.F32),
    ("unknown_15ch", _Kind.I32),
    ("unknown_160h", _Kind.F32),
    ("padding_164h", _Kind.U32),
)


@dataclass
class Ammo:
    """An ammunition type as stored by the game.

    ``reticle`` is 1 for the standard reticle, 2 for aircraft bombs, 3 for
    rockets and 4 for aircraft ammo. ``caliber`` selects shell behaviour
    (100 default, 130 rocket/incendiary, 140 laser guided, 160 proxy), and
    ``index`` is what a weapon's caliber refers to.
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
    shell_far: EscadraString = field(default_factory=EscadraString)
    caliber: int = 0
    index: int = 0
    speed: float = 0.0
    ap_drag: float = 0.0
    explosive_power: float = 0.0
    penetrative_power: float = 0.0
    incendiary_power: float = 0.0
    shop_price: int = 0
    unknown_150h: float = 0.0
    unknown_154h: float = 0.0
    unknown_158h: float = 0.0
    unknown_15ch: int = 0
    unknown_160h: float = 0.0
    padding_164h: int = 0

    def __post_init__(self) -> None:
        _coerce_strings(_SCHEMA, self)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of every field, strings as ``str``, in record order."""
        return _write_fields(_SCHEMA, self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Ammo:
        """Build a record from a mapping; every field is required."""
        return cls(**_read_fields(_SCHEMA, data))

    def to_json(self) -> str:
        """Compact JSON text of the record."""
        return _dump_json(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes) -> Ammo:
        """Parse a record from JSON text."""
        return cls.from_dict(_load_json(text))