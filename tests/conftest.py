import pytest

from arbitrary_precision_engine import ArbitraryPrecisionCalculatorEngine
from calculator_controller import CalculatorController
from calculator_engine import CalculatorEngine


@pytest.fixture
def engine() -> CalculatorEngine:
    return CalculatorEngine(seed=1234)


@pytest.fixture
def ap_engine() -> ArbitraryPrecisionCalculatorEngine:
    return ArbitraryPrecisionCalculatorEngine(seed=1234)


@pytest.fixture
def controller(engine) -> CalculatorController:
    return CalculatorController(engine)


@pytest.fixture
def ap_controller(ap_engine) -> CalculatorController:
    return CalculatorController(ap_engine)
