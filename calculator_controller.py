"""
Controlador de la calculadora.

Traduce los gestos del usuario (botones y teclas) a llamadas al motor y
decide qué texto mostrar. No depende de tkinter: la ventana solo le pasa
acciones y pinta el texto resultante.

El motor es la única fuente de verdad para operandos y operador pendiente.
Aquí solo vive el estado local de la entrada: el texto en pantalla y si el
próximo dígito empieza un número nuevo.
"""

import logging

from base_conversion import Base, conversions, format_in_base, parse_integer
from calculator_engine import ARITHMETIC_OPS, CalculatorEngine, Op


logger = logging.getLogger(__name__)

ERROR_TEXT = "Error"

_DIGITS = "0123456789"

_KEY_CHARS = {
    "+": "op:add",
    "-": "op:sub",
    "*": "op:mul",
    "/": "op:div",
    "=": "equals",
    ".": "dot",
    ",": "dot",
}

_KEY_SYMS = {
    "Return": "equals",
    "KP_Enter": "equals",
    "BackSpace": "backspace",
    "Escape": "clear",
    "Delete": "clear_entry",
    "KP_Add": "op:add",
    "KP_Subtract": "op:sub",
    "KP_Multiply": "op:mul",
    "KP_Divide": "op:div",
    "KP_Decimal": "dot",
}


def action_for_key(char: str, keysym: str):
    """Acción asociada a una tecla, o None si la tecla no se usa."""
    if keysym in _KEY_SYMS:
        return _KEY_SYMS[keysym]
    if keysym.startswith("KP_") and len(keysym) == 4 and keysym[3] in _DIGITS:
        return f"digit:{keysym[3]}"
    if len(char) == 1 and char in _DIGITS:
        return f"digit:{char}"
    return _KEY_CHARS.get(char)


class CalculatorController:
    """Política de entrada sobre un CalculatorEngine."""

    OPERATORS = {
        "add": Op.ADD,
        "sub": Op.SUB,
        "mul": Op.MUL,
        "div": Op.DIV,
    }

    BASES = {
        "dec": Op.TO_DEC,
        "hex": Op.TO_HEX,
        "oct": Op.TO_OCT,
        "bin": Op.TO_BIN,
    }

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else CalculatorEngine()
        self._display = "0"
        self._new_entry = True

    @property
    def display(self) -> str:
        return self._display

    @property
    def entering(self) -> bool:
        """True mientras el usuario escribe un número."""
        return not self._new_entry

    # ── Despacho de acciones ─────────────────────────────────────

    def press(self, action: str) -> str:
        """Aplica una acción y devuelve el texto a mostrar.

        Raises:
            ValueError: acción desconocida.
        """
        logger.debug("Acción %r (pantalla=%r)", action, self._display)
        name, _, arg = action.partition(":")

        if name == "digit" and len(arg) == 1 and arg in _DIGITS:
            self.append_digit(int(arg))
        elif action == "dot":
            self.append_dot()
        elif action == "backspace":
            self.backspace()
        elif action == "clear":
            self.clear()
        elif action == "clear_entry":
            self.clear_entry()
        elif name == "op" and arg in self.OPERATORS:
            self.operator(self.OPERATORS[arg])
        elif action == "equals":
            self.equals()
        elif action == "random":
            self.random()
        elif name == "base" and arg in self.BASES:
            self.to_base(self.BASES[arg])
        else:
            raise ValueError(f"Acción desconocida: {action!r}")
        return self._display

    # ── Entrada ──────────────────────────────────────────────────

    def append_digit(self, digit: int):
        if not 0 <= digit <= 9:
            raise ValueError(f"Dígito inválido: {digit!r}")
        if self._new_entry or self._display == "0":
            self._display = str(digit)
        else:
            self._display += str(digit)
        self._new_entry = False

    def append_dot(self):
        if self._new_entry:
            self._display = "0."
        elif "." not in self._display:
            self._display += "."
        self._new_entry = False

    def backspace(self):
        if self._new_entry:
            return
        text = self._display[:-1]
        if text in ("", "-"):
            text = "0"
        self._display = text

    def clear(self):
        self._display = "0"
        self._new_entry = True
        self.engine.clear()

    def clear_entry(self):
        """Borra solo el número en curso; conserva operador y value1."""
        self._display = "0"
        self._new_entry = False
        if self.engine.op is not Op.NONE:
            self.engine.clear_entry()

    # ── Operaciones ──────────────────────────────────────────────

    def operator(self, op: Op):
        if self._new_entry and not self.engine.has_v1:
            self.engine.set_value1(self._display_value())
        elif not self._new_entry:
            self._commit_entry()

        engine = self.engine
        if engine.op in ARITHMETIC_OPS and engine.has_v1 and engine.has_v2:
            if not self._carry_result(engine.evaluate()):
                return

        self.engine.set_op(op)
        self._new_entry = True

    def equals(self):
        if not self._new_entry:
            self._commit_entry()
        engine = self.engine
        if engine.op is Op.NONE:
            logger.debug("'=' sin operador pendiente")
            return
        if engine.op in ARITHMETIC_OPS and not engine.has_v2:
            # Tras el operador la entrada en curso vale 0
            engine.set_value2(0)
        self._carry_result(engine.evaluate())

    def random(self):
        engine = self.engine
        value = engine.random()
        if engine.op is not Op.NONE and engine.has_v1:
            engine.set_value2(value)
        else:
            engine.clear()
            engine.set_value1(value)
        self._display = engine.format_result(value)
        self._new_entry = True

    def to_base(self, op: Op):
        """Muestra el número actual en la base de op; inicia un cálculo nuevo."""
        engine = self.engine
        if not self._new_entry:
            value = self._display_value()
        elif engine.has_v1:
            value = engine.value1
        else:
            value = self._display_value()

        engine.clear()
        engine.set_value1(value)
        engine.set_op(op)
        result = engine.evaluate()
        if result is None:
            self._show_error()
            return

        base = Base.for_op(op)
        if base is Base.DEC:
            text = engine.format_result(result)
        else:
            try:
                text = format_in_base(result, base)
            except ValueError:
                logger.debug("Valor no representable en base %d", base.value)
                self._show_error()
                return

        engine.clear()
        engine.set_value1(result)
        self._display = text
        self._new_entry = True

    def conversions(self):
        """Conversiones del número en pantalla, o None si no es un entero."""
        n = parse_integer(self._display)
        if n is None:
            logger.debug("Conversión omitida: %r no es entero", self._display)
            return None
        return conversions(n)

    # ── Auxiliares ───────────────────────────────────────────────

    def _display_value(self):
        text = self._display
        if text == ERROR_TEXT:
            text = "0"
        if text.endswith("."):
            text = text[:-1]
        return self.engine.coerce(text)

    def _commit_entry(self):
        value = self._display_value()
        if self.engine.op is Op.NONE:
            self.engine.set_value1(value)
        else:
            self.engine.set_value2(value)
        self._new_entry = True

    def _carry_result(self, result) -> bool:
        if result is None:
            self._show_error()
            return False
        self._display = self.engine.format_result(result)
        self.engine.clear()
        self.engine.set_value1(result)
        self._new_entry = True
        return True

    def _show_error(self):
        logger.debug("Sin resultado; se reinicia el motor")
        self._display = ERROR_TEXT
        self.engine.clear()
        self._new_entry = True
