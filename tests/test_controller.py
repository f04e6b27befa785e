import pytest

from config.config import validate_config
from controller import CalculatorController
from core import DomainError, ExpressionError


def test_validate_and_calculate():
    controller = CalculatorController()
    assert controller.validate("(2+3)*4")
    assert not controller.validate("(2+3")
    assert controller.calculate("(2+3)*4") == 20.0


def test_calculate_propagates_domain_error():
    with pytest.raises(DomainError, match="negative in sqrt"):
        CalculatorController().calculate("sqrt(x)", -4.0)


def test_try_calculate_keeps_message():
    result = CalculatorController().try_calculate("asin(x)", 3.0)
    assert not result.ok
    assert isinstance(result.error, DomainError)
    assert result.message == "value in asin or acos must be in range[-1; 1]"


def test_coordinates_have_same_length():
    controller = CalculatorController()
    xs = controller.get_coordinate_x(-3, 5)
    ys = controller.get_coordinate_y("x^2-1", -3, 5)
    assert len(xs) == len(ys) > 0
    assert ys[0] == pytest.approx(8.0)


def test_plot_data_accepts_expression_ending_in_variable():
    frame = CalculatorController().plot_data("x*x", -1, 1)
    assert frame is not None
    assert len(frame) > 0
    assert frame["y"].iloc[0] == 1


def test_plot_data_requires_variable():
    with pytest.raises(ExpressionError, match="Need X"):
        CalculatorController().plot_data("2+2", -1, 1)


def test_plot_data_frame():
    frame = CalculatorController().plot_data("(x+1)", -1, 1)
    assert frame["x"].iloc[0] == -1
    assert frame["y"].iloc[0] == 0


def test_validate_config():
    assert validate_config()
