"""Motor de cálculo con precisión extendida sobre mpmath."""

from __future__ import annotations

from calculator_engine import (
    DEFAULT_RANDOM_UPPER_BOUND,
    CalculatorEngine,
    Op,
)

try:
    from mpmath import mp
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "mpmath no está instalado. Instala con: pip install mpmath"
    ) from exc


class MPMathProvider:
    """Proveedor aritmético basado en mpmath con precisión fija en bits."""

    def __init__(self, precision_bits: int = 64):
        self._precision_bits = precision_bits

    @property
    def precision_bits(self) -> int:
        return self._precision_bits

    def coerce(self, value):
        # Un float se convierte a mpf de forma exacta; el texto se redondea
        try:
            with mp.workprec(self._precision_bits):
                return mp.mpf(value)
        except TypeError as exc:
            raise ValueError(f"Operando inválido: {value!r}") from exc

    def from_integer(self, n: int):
        with mp.workprec(self._precision_bits):
            return mp.mpf(n)

    def _at_precision(self, fn):
        bits = self._precision_bits

        def wrapped(a, b):
            with mp.workprec(bits):
                return fn(a, b)

        return wrapped

    def build_operations(self) -> dict:
        return {
            Op.ADD: self._at_precision(lambda a, b: a + b),
            Op.SUB: self._at_precision(lambda a, b: a - b),
            Op.MUL: self._at_precision(lambda a, b: a * b),
            Op.DIV: self._at_precision(lambda a, b: a / b),
        }


class ArbitraryPrecisionCalculatorEngine(CalculatorEngine):
    """CalculatorEngine con operandos mpf; 64 bits de mantisa por omisión."""

    def __init__(self, precision_bits: int = 64, display_digits: int = 18,
                 random_upper_bound: int = DEFAULT_RANDOM_UPPER_BOUND,
                 seed=None):
        self._display_digits = max(8, display_digits)
        super().__init__(
            provider=MPMathProvider(max(53, precision_bits)),
            random_upper_bound=random_upper_bound,
            seed=seed,
        )

    @property
    def precision_bits(self) -> int:
        return self._provider.precision_bits

    @property
    def display_digits(self) -> int:
        return self._display_digits

    def format_result(self, value) -> str:
        if isinstance(value, (int, float)):
            return CalculatorEngine.format_result(value)

        if not mp.isfinite(value):
            if mp.isnan(value):
                return "NaN"
            return "∞" if value > 0 else "-∞"

        if value == 0:
            return "0"

        if mp.floor(value) == value and abs(value) < mp.mpf("1e18"):
            return str(int(value))

        with mp.workprec(self.precision_bits):
            return mp.nstr(value, n=self._display_digits)
