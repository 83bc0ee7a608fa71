"""
rnd - generate a list of random numbers from the command line.

    rnd [options] type distribution number [min/stddev] [max/mean]

type          'f' for floats (64 bit), 'i' for integers
distribution  'u' uniform, 'n' normal, 'e' exponential
number        how many numbers to produce
min/stddev    minimum (uniform), standard deviation (normal) or scale (exponential)
max/mean      maximum (uniform), mean (normal) or shift (exponential)

The type and distribution can also be given as one token, e.g. 'fu'.
"""

import argparse
import os
import re
import sys
import numpy as np
from typing import List, Optional, Sequence

from .distributions import (
    DistributionType,
    NumberType,
    ParameterError,
    PARAMETER_ERROR_EXIT_CODE,
    INT64_MIN,
    INT64_MAX,
    Number,
)
from .formatting import format_samples
from .generator import SampleRequest, generate

MISSING_PARAMETERS_MESSAGE = (
    "Missing parameters: type (float/int) distribution (uniform/normal/exponential) "
    "number [min/stdev] [max/mean]"
)
MAX_POSITIONALS = 5
COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")
# Negative numbers argparse already leaves as positionals
PLAIN_NEGATIVE_PATTERN = re.compile(r"-[0-9]+|-[0-9]*\.[0-9]+")


class RndArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with the parameter error code instead of 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(PARAMETER_ERROR_EXIT_CODE, f"{self.prog}: error: {message}\n")


def build_parser() -> RndArgumentParser:
    parser = RndArgumentParser(
        prog="rnd",
        usage="%(prog)s [options] type distribution number [min/stddev] [max/mean]",
        description="Generate a comma separated list of random numbers.",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("params", nargs="*", metavar="PARAM",
                        help="Positional parameters, see usage")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible sequence")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Describe the run on stderr")
    return parser


def protect_negative_numbers(argv: Sequence[str]) -> List[str]:
    """
    Rewrite negative float literals such as '-1e3' into plain decimal form.

    argparse only recognises '-5' and '-2.5' style negatives as
    positionals, anything else starting with a dash is taken for an option.
    The rewritten text keeps a decimal point so it still fails int parsing.
    """
    protected = []
    for token in argv:
        if token.startswith("-") and not PLAIN_NEGATIVE_PATTERN.fullmatch(token):
            try:
                value = float(token)
            except ValueError:
                value = None
            if value is not None and np.isfinite(value):
                token = np.format_float_positional(value, unique=True, trim="0")
        protected.append(token)
    return protected


def split_combined_tag(tokens: List[str]) -> List[str]:
    """Expand a leading two-letter token like 'fu' into ['f', 'u']."""
    if tokens and len(tokens[0]) == 2:
        head = tokens[0]
        return [head[0], head[1]] + tokens[1:]
    return tokens


def parse_count(token: str) -> int:
    if not COUNT_PATTERN.fullmatch(token):
        raise ParameterError("Error: Number not specified properly")
    count = int(token)
    if count < 0:
        raise ParameterError("Error: Number not specified properly")
    return count


def parse_bound(token: str, number_type: NumberType) -> Number:
    """Parse min/stddev or max/mean as an int or float depending on type."""
    converter = int if number_type is NumberType.INT else float
    try:
        value = converter(token)
    except ValueError:
        raise ParameterError("Error: Cannot convert parameter (min or max)")
    if number_type is NumberType.INT and not INT64_MIN <= value <= INT64_MAX:
        raise ParameterError(f"Error: Parameter {token} is outside the 64-bit integer range")
    return value


def parse_request(params: Sequence[str]) -> SampleRequest:
    """
    Turn the positional tokens into a SampleRequest.

    Args:
        params: Positional arguments after option parsing

    Returns:
        Validated SampleRequest
    """
    tokens = split_combined_tag(list(params))
    if len(tokens) < 3:
        raise ParameterError(MISSING_PARAMETERS_MESSAGE)
    if len(tokens) > MAX_POSITIONALS:
        raise ParameterError(f"Error: Too many parameters ({len(tokens)}), expected at most {MAX_POSITIONALS}")

    count = parse_count(tokens[2])
    number_type = NumberType.from_tag(tokens[0])
    distribution_type = DistributionType.from_tag(tokens[1])
    bounds = [parse_bound(token, number_type) for token in tokens[3:]]

    return SampleRequest.from_parameters(number_type, distribution_type, count, *bounds)


def write_line(line: str) -> None:
    try:
        print(line)
        sys.stdout.flush()
    except BrokenPipeError:
        # Python flushes stdout again at exit, point it at devnull first
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function, returns the process exit code."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_intermixed_args(protect_negative_numbers(argv))

    try:
        request = parse_request(args.params)
        samples = generate(request, seed=args.seed)
    except ParameterError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return e.exit_code

    if args.verbose:
        info = request.to_dict()
        seed_info = f" (seed {args.seed})" if args.seed is not None else ""
        print(f"Generating {info['count']} {info['type']} samples "
              f"from {info['distribution']}{seed_info}", file=sys.stderr)

    if len(samples) == 0:
        return 0

    write_line(format_samples(samples))
    return 0

