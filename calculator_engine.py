"""
Motor de cálculo para la calculadora multifuncional.

Este módulo provee la clase CalculatorEngine, que guarda dos operandos y un
operador pendiente y evalúa la operación actual. Es independiente de la
interfaz y puede reemplazarse por implementaciones alternativas
(e.g., precisión extendida con mpmath).

Contrato de interfaz:
    - clear(), clear_entry(), set_op(op), set_value1(v), set_value2(v)
    - has_v1, has_v2, value1, value2, op: propiedades de solo lectura
    - evaluate() -> número | None   (None = sin resultado)
"""

import enum
import logging
import math
import operator
import random as _random


logger = logging.getLogger(__name__)

DEFAULT_RANDOM_UPPER_BOUND = 999999


class Op(enum.Enum):
    """Operaciones soportadas por el motor."""

    NONE = "none"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    TO_DEC = "dec"
    TO_HEX = "hex"
    TO_OCT = "oct"
    TO_BIN = "bin"
    RANDOM = "random"


ARITHMETIC_OPS = frozenset({Op.ADD, Op.SUB, Op.MUL, Op.DIV})
BASE_OPS = frozenset({Op.TO_DEC, Op.TO_HEX, Op.TO_OCT, Op.TO_BIN})


class PythonMathProvider:
    """Aritmética de punto flotante nativa de Python."""

    def coerce(self, value):
        try:
            return float(value)
        except TypeError as exc:
            raise ValueError(f"Operando inválido: {value!r}") from exc

    def from_integer(self, n: int):
        return float(n)

    def build_operations(self) -> dict:
        return {
            Op.ADD: operator.add,
            Op.SUB: operator.sub,
            Op.MUL: operator.mul,
            Op.DIV: operator.truediv,
        }


class CalculatorEngine:
    """Guarda dos operandos y un operador; evalúa bajo demanda."""

    def __init__(self, provider=None,
                 random_upper_bound: int = DEFAULT_RANDOM_UPPER_BOUND,
                 seed=None):
        self._provider = provider if provider is not None else PythonMathProvider()
        self._operations = self._provider.build_operations()
        self._random_upper_bound = abs(int(random_upper_bound))
        self._rng = _random.Random(seed)
        self._dispatch = {
            Op.ADD: self.add,
            Op.SUB: self.sub,
            Op.MUL: self.mul,
            Op.DIV: self.div,
            Op.TO_DEC: self.to_dec,
            Op.TO_HEX: self.to_hex,
            Op.TO_OCT: self.to_oct,
            Op.TO_BIN: self.to_bin,
            Op.RANDOM: self.random,
        }
        self.clear()

    # ── Estado ───────────────────────────────────────────────────

    def clear(self):
        """Reinicia operandos, banderas y operador."""
        self._value1 = self._provider.from_integer(0)
        self._value2 = self._provider.from_integer(0)
        self._has_v1 = False
        self._has_v2 = False
        self._op = Op.NONE

    def clear_entry(self):
        """Descarta solo el segundo operando; conserva value1 y el operador."""
        self._value2 = self._provider.from_integer(0)
        self._has_v2 = False

    def set_op(self, op):
        """Reemplaza el operador pendiente.

        Acepta un miembro de Op o su valor ("add", "hex", ...).

        Raises:
            ValueError: el valor no pertenece a la enumeración.
        """
        self._op = Op(op)

    def set_value1(self, value):
        self._value1 = self._provider.coerce(value)
        self._has_v1 = True

    def set_value2(self, value):
        self._value2 = self._provider.coerce(value)
        self._has_v2 = True

    def coerce(self, value):
        """Convierte un número o texto numérico al tipo del proveedor."""
        return self._provider.coerce(value)

    # ── Accesores ────────────────────────────────────────────────

    @property
    def op(self) -> Op:
        return self._op

    @property
    def value1(self):
        return self._value1

    @property
    def value2(self):
        return self._value2

    @property
    def has_v1(self) -> bool:
        return self._has_v1

    @property
    def has_v2(self) -> bool:
        return self._has_v2

    @property
    def random_upper_bound(self) -> int:
        return self._random_upper_bound

    # ── Operaciones aritméticas ──────────────────────────────────

    def _binary(self, op: Op):
        if not (self._has_v1 and self._has_v2):
            logger.debug("%s sin resultado: faltan operandos", op.name)
            return None
        return self._operations[op](self._value1, self._value2)

    def add(self):
        return self._binary(Op.ADD)

    def sub(self):
        return self._binary(Op.SUB)

    def mul(self):
        return self._binary(Op.MUL)

    def div(self):
        """Cociente value1 / value2; None si falta un operando o value2 == 0."""
        if self._has_v1 and self._has_v2 and self._value2 == 0:
            logger.debug("DIV sin resultado: división por cero")
            return None
        return self._binary(Op.DIV)

    # ── Bases (paso directo de value1; la interfaz da formato) ───

    def _passthrough(self, op: Op):
        if not self._has_v1:
            logger.debug("%s sin resultado: falta el primer operando", op.name)
            return None
        return self._value1

    def to_dec(self):
        return self._passthrough(Op.TO_DEC)

    def to_hex(self):
        return self._passthrough(Op.TO_HEX)

    def to_oct(self):
        return self._passthrough(Op.TO_OCT)

    def to_bin(self):
        return self._passthrough(Op.TO_BIN)

    # ── Aleatorio ────────────────────────────────────────────────

    def random(self, max_value=None):
        """Entero uniforme en [0, abs(max_value)].

        Sin argumento usa random_upper_bound (999999 por omisión).
        """
        if max_value is None:
            upper = self._random_upper_bound
        else:
            upper = abs(int(max_value))
        return self._provider.from_integer(self._rng.randint(0, upper))

    # ── Evaluación principal ─────────────────────────────────────

    def evaluate(self):
        """Evalúa según el operador actual sin modificar el estado.

        Returns:
            El resultado, o None si no hay resultado válido (operandos
            faltantes, división por cero u operador Op.NONE).
        """
        handler = self._dispatch.get(self._op)
        if handler is None:
            logger.debug("Sin resultado: no hay operador seleccionado")
            return None
        return handler()

    # ── Formato del resultado ────────────────────────────────────

    @staticmethod
    def format_result(value) -> str:
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            if value == float("inf"):
                return "∞"
            if value == float("-inf"):
                return "-∞"
            if value == int(value) and abs(value) < 1e15:
                return str(int(value))
            return f"{value:.15g}"

        return str(value)
