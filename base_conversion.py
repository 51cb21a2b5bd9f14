"""Formato en bases numéricas y conversiones para el diálogo de la interfaz."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from calculator_engine import Op


class Base(enum.Enum):
    DEC = 10
    HEX = 16
    OCT = 8
    BIN = 2

    @classmethod
    def for_op(cls, op: Op) -> "Base":
        return _OP_BASES[op]


_OP_BASES = {
    Op.TO_DEC: Base.DEC,
    Op.TO_HEX: Base.HEX,
    Op.TO_OCT: Base.OCT,
    Op.TO_BIN: Base.BIN,
}

_INT_RE = re.compile(r"^[+-]?\d+$")


def round_half_away(value) -> int:
    """Redondea al entero más cercano; los empates se alejan de cero.

    Acepta float, int o mpf.

    Raises:
        ValueError: el valor es NaN o infinito.
    """
    try:
        n = int(value)
    except OverflowError as exc:
        raise ValueError("No se puede redondear un valor infinito") from exc
    if abs(value - n) >= 0.5:
        n += -1 if value < 0 else 1
    return n


def format_in_base(value, base: Base) -> str:
    """Dígitos en mayúsculas, prefijo '-' para negativos, sin prefijo de base."""
    n = round_half_away(value)
    if base is Base.DEC:
        return str(n)
    fmt = {Base.HEX: "X", Base.OCT: "o", Base.BIN: "b"}[base]
    return format(n, fmt)


def parse_integer(text: str) -> int | None:
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


@dataclass(frozen=True)
class BaseConversions:
    """Representaciones de un entero y complementos de su magnitud."""

    value: int
    width: int
    dec: str
    hex: str
    oct: str
    bin: str
    ones_complement: str
    twos_complement: str

    def as_text(self) -> str:
        return (
            f"Dec:  {self.dec}\n"
            f"Hex:  {self.hex}\n"
            f"Oct:  {self.oct}\n"
            f"Bin:  {self.bin}\n"
            f"One's Complement ({self.width}-bit):\n{self.ones_complement}\n"
            f"Two's Complement ({self.width}-bit):\n{self.twos_complement}\n"
        )


def conversions(n: int) -> BaseConversions:
    """Conversiones de n; los complementos usan el ancho mínimo de |n| + 1 bit."""
    magnitude = abs(n)
    width = max(1, magnitude.bit_length()) + 1
    mask = (1 << width) - 1
    ones = ~magnitude & mask
    twos = (ones + 1) & mask
    return BaseConversions(
        value=n,
        width=width,
        dec=str(n),
        hex=format(n, "X"),
        oct=format(n, "o"),
        bin=format(n, "b"),
        ones_complement=format(ones, "b").zfill(width),
        twos_complement=format(twos, "b").zfill(width),
    )
