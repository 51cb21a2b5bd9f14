"""Punto de entrada de la calculadora multifuncional."""

import logging
import tkinter as tk

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp


USE_ARBITRARY_PRECISION = True
AP_PRECISION_BITS = 64
AP_DISPLAY_DIGITS = 18
RANDOM_UPPER_BOUND = 999999
LOG_LEVEL = logging.WARNING


def build_engine():
    if USE_ARBITRARY_PRECISION:
        from arbitrary_precision_engine import ArbitraryPrecisionCalculatorEngine

        return ArbitraryPrecisionCalculatorEngine(
            precision_bits=AP_PRECISION_BITS,
            display_digits=AP_DISPLAY_DIGITS,
            random_upper_bound=RANDOM_UPPER_BOUND,
        )
    return CalculatorEngine(random_upper_bound=RANDOM_UPPER_BOUND)


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    root = tk.Tk()
    root.geometry("360x520")
    root.minsize(320, 480)
    CalculatorApp(root, engine=build_engine())
    root.mainloop()


if __name__ == "__main__":
    main()
