"""
Command-line interface for yardcalc.

Provides the main entry point with subcommands for evaluating a single
expression, printing its postfix form, and running the interactive loop.
"""

import argparse
import logging
import math
import sys
from typing import Optional, TextIO

from .core import Calculator
from .core.calculator import format_postfix
from .frontend import LexerError, ParenthesisError
from .utils.settings import Settings


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="yardcalc",
        description="yardcalc: shunting-yard arithmetic calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m yardcalc eval "(1 + 2) * 3"
  python -m yardcalc eval "2 ^ 3 ^ 2" --show-postfix
  python -m yardcalc rpn "-3 ^ 2"
  python -m yardcalc repl
        """
    )

    subparsers = parser.add_subparsers(dest="command")

    # Eval command
    eval_parser = subparsers.add_parser(
        "eval",
        help="Evaluate a single expression"
    )
    eval_parser.add_argument(
        "expression",
        type=str,
        help="Arithmetic expression to evaluate"
    )
    eval_parser.add_argument(
        "--show-postfix",
        action="store_true",
        help="Also print the postfix (RPN) form"
    )
    eval_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    # RPN command
    rpn_parser = subparsers.add_parser(
        "rpn",
        help="Print the postfix (RPN) form of an expression"
    )
    rpn_parser.add_argument(
        "expression",
        type=str,
        help="Arithmetic expression to convert"
    )

    # REPL command
    repl_parser = subparsers.add_parser(
        "repl",
        help="Read expressions from standard input until 'exit'"
    )
    repl_parser.add_argument(
        "--prompt",
        type=str,
        default=None,
        help="Prompt printed before each line"
    )
    repl_parser.add_argument(
        "--exit-command",
        type=str,
        default=None,
        help="Line that ends the loop (default: exit)"
    )
    repl_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Configure root logging for the command-line tool.

    Without --verbose nothing is configured, so only warnings and errors
    reach stderr through logging's last-resort handler.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S"
        )


def format_value(value: float) -> str:
    """Format a result, dropping the '.0' of integral values."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def handle_eval(args: argparse.Namespace) -> int:
    """Handle the eval command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    calculator = Calculator()

    if args.verbose:
        print(f"[yardcalc] Expression: {args.expression}")

    result = calculator.calculate(args.expression)

    if args.show_postfix or args.verbose:
        print(f"[yardcalc] Postfix: {format_postfix(result.postfix)}")

    if result.success:
        print(format_value(result.value))
        return 0
    else:
        print(f"[yardcalc] Error: {result.error_message}", file=sys.stderr)
        return 1


def handle_rpn(args: argparse.Namespace) -> int:
    """Handle the rpn command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    calculator = Calculator()
    try:
        postfix = calculator.to_postfix(args.expression)
    except (LexerError, ParenthesisError) as e:
        print(f"[yardcalc] Error: {e}", file=sys.stderr)
        return 1

    print(format_postfix(postfix))
    return 0


def run_repl(
    settings: Settings,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None
) -> int:
    """Run the read-evaluate-print loop.

    Reads one line at a time until the exit command or end of input.
    A failing line is reported and the loop carries on.

    Args:
        settings: Prompt, exit command and banner to use
        stdin: Input stream (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)
        stderr: Error stream (defaults to sys.stderr)

    Returns:
        int: Exit code (always 0)
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    calculator = Calculator(settings)

    while True:
        stdout.write(settings.prompt)
        stdout.flush()
        line = stdin.readline()
        stdout.write("\n")

        if not line:
            break

        text = line.rstrip("\r\n")
        if text == settings.exit_command:
            break
        if not text.strip():
            continue

        result = calculator.calculate(text)

        if settings.verbose:
            stdout.write(f"[yardcalc] Postfix: {format_postfix(result.postfix)}\n")

        if result.success:
            stdout.write(f"{settings.result_banner}\n {format_value(result.value)}\n\n")
        else:
            stderr.write(f"[yardcalc] Error: {result.error_message}\n")

    return 0


def handle_repl(args: argparse.Namespace) -> int:
    """Handle the repl command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code
    """
    settings = Settings(verbose=getattr(args, "verbose", False))
    if getattr(args, "prompt", None) is not None:
        settings.prompt = args.prompt
    if getattr(args, "exit_command", None) is not None:
        settings.exit_command = args.exit_command
    return run_repl(settings)


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"yardcalc version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(getattr(args, "verbose", False))

    if args.command == "eval":
        return handle_eval(args)
    elif args.command == "rpn":
        return handle_rpn(args)
    elif args.command in ("repl", None):
        return handle_repl(args)
    elif args.command == "version":
        return handle_version(args)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
