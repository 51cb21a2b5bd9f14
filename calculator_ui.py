"""
Interfaz gráfica de la calculadora multifuncional.

Usa tkinter. Toda la política de entrada vive en CalculatorController;
esta ventana solo construye los widgets, traduce clics y teclas a
acciones y pinta el texto que devuelve el controlador.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont
from tkinter import messagebox

from calculator_controller import CalculatorController, action_for_key


logger = logging.getLogger(__name__)


class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "display_fg": "#A6E3A1",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "func":       "#45475A",
        "func_fg":    "#CDD6F4",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "num", "op", "func", "special", "equals"

    KEYPAD = [
        [("Clr", "clear", "special"), ("←", "backspace", "special"),
         ("CE", "clear_entry", "special"), ("÷", "op:div", "op")],

        [("7", "digit:7", "num"), ("8", "digit:8", "num"),
         ("9", "digit:9", "num"), ("×", "op:mul", "op")],

        [("4", "digit:4", "num"), ("5", "digit:5", "num"),
         ("6", "digit:6", "num"), ("−", "op:sub", "op")],

        [("1", "digit:1", "num"), ("2", "digit:2", "num"),
         ("3", "digit:3", "num"), ("+", "op:add", "op")],

        [("0", "digit:0", "num"), (".", "dot", "num"),
         ("=", "equals", "equals")],

        [("Dec", "base:dec", "func"), ("Hex", "base:hex", "func"),
         ("Oct", "base:oct", "func"), ("Bin", "base:bin", "func")],

        [("Convert", "convert", "func"), ("Random", "random", "func")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Multifunctional Calculator")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.controller = CalculatorController(engine)
        self._buttons: dict[str, tk.Button] = {}

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()
        logger.debug("Ventana lista")

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_display = tkfont.Font(family="Consolas", size=22, weight="bold")
        self._f_btn     = tkfont.Font(family="Segoe UI", size=15)
        self._f_func    = tkfont.Font(family="Segoe UI", size=12)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.display_var = tk.StringVar(value=self.controller.display)
        self.display_entry = tk.Entry(
            frame, textvariable=self.display_var, state="readonly",
            font=self._f_display, fg=self.C["display_fg"],
            readonlybackground=self.C["display_bg"],
            relief="flat", justify="center", bd=0,
        )
        self.display_entry.pack(fill="x", pady=4)

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                font = self._f_func if kind == "func" else self._f_btn
                btn = tk.Button(
                    frame, text=text, font=font,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                self._buttons[action] = btn
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        # Columnas sobrantes al primer botón (el '0' en la fila inferior)
        spans[0] += extra
        return spans

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        action = action_for_key(event.char, event.keysym)
        if action is None:
            return None
        btn = self._buttons.get(action)
        if btn is not None:
            btn.flash()
        self._on_key(action)
        return "break"

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        if action == "convert":
            self._show_conversions()
            return
        self.display_var.set(self.controller.press(action))

    def _show_conversions(self):
        result = self.controller.conversions()
        if result is None:
            return
        messagebox.showinfo("Conversions", result.as_text(), parent=self.root)
