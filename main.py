"""主程序入口 - 命令行计算与绘图数据导出"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, validate_config
from controller import CalculatorController
from core import DomainError, ExpressionError
from utils import format_result

# 设置日志
logging.basicConfig(
    level=LOGGING_CONFIG["level"],
    format=LOGGING_CONFIG["format"]
)
logger = logging.getLogger(__name__)


def main(args):
    validate_config()
    controller = CalculatorController()
    expression = args.expression

    if args.plot is None:
        if not controller.validate(expression):
            print("Error in expression")
            return 1
        try:
            value = controller.calculate(expression, args.x)
        except (DomainError, ExpressionError) as e:
            print(str(e))
            return 1
        print(format_result(value, args.precision))
        return 0

    xmin, xmax = args.plot
    logger.info(f"Sampling '{expression}' on [{xmin}, {xmax})")
    try:
        frame = controller.plot_data(expression, xmin, xmax)
    except (DomainError, ExpressionError) as e:
        print(str(e))
        return 1

    logger.info(f"Sampled {len(frame)} points")
    if args.output_path:
        logger.info(f"Saving plot data to {args.output_path}")
        frame.to_csv(args.output_path, index=False)
    else:
        print(frame.to_string(index=False))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Single-variable expression calculator")
    parser.add_argument(
        "--expression",
        type=str,
        required=True,
        help="Expression to evaluate, e.g. 'sin(x)+2^3'"
    )
    parser.add_argument(
        "--x",
        type=float,
        default=0.0,
        help="Value bound to the variable x"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places of the printed result (default: 7)"
    )
    parser.add_argument(
        "--plot",
        type=float,
        nargs=2,
        metavar=("XMIN", "XMAX"),
        default=None,
        help="Sample the expression on [XMIN, XMAX) instead of evaluating once"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="CSV file for the sampled x/y columns"
    )
    return parser


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
