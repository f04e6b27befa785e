import pandas as pd

from main import build_parser, main


def run(argv):
    return main(build_parser().parse_args(argv))


def test_prints_formatted_result(capsys):
    assert run(["--expression", "2+3*4"]) == 0
    assert capsys.readouterr().out.strip() == "14.0000000"


def test_binds_x_and_precision(capsys):
    assert run(["--expression", "(x*2)", "--x", "1.5", "--precision", "2"]) == 0
    assert capsys.readouterr().out.strip() == "3.00"


def test_invalid_expression(capsys):
    assert run(["--expression", "(2+3"]) == 1
    assert capsys.readouterr().out.strip() == "Error in expression"


def test_domain_error_message(capsys):
    assert run(["--expression", "1/0"]) == 1
    assert capsys.readouterr().out.strip() == "can't divide by zero"


def test_plot_writes_csv(tmp_path):
    output = tmp_path / "plot.csv"
    assert run(["--expression", "(x*x)", "--plot", "-2", "2", "--output_path", str(output)]) == 0
    frame = pd.read_csv(output)
    assert list(frame.columns) == ["x", "y"]
    assert frame["x"].iloc[0] == -2
    assert frame["y"].iloc[0] == 4


def test_plot_without_variable(capsys):
    assert run(["--expression", "2+2", "--plot", "0", "1"]) == 1
    assert capsys.readouterr().out.strip() == "Need X"


def test_plot_expression_ending_in_variable(tmp_path):
    output = tmp_path / "square.csv"
    assert run(["--expression", "x*x", "--plot", "-1", "1", "--output_path", str(output)]) == 0
    frame = pd.read_csv(output)
    assert frame["y"].iloc[0] == 1
    assert len(frame) > 0
