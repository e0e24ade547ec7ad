import argparse
import logging
import sys

from config.settings import LOG_FORMAT, LOG_LEVEL, VERSION
from conv_lib.converter import decode, encode
from conv_lib.result import ErrorKind, Result

logging.basicConfig(format=LOG_FORMAT, level=LOG_LEVEL)
logger = logging.getLogger(__name__)

EXAMPLES = """Supported encoding formats: Base16, Bech32m & Base58.

Examples:
  To Bech32m:
    $ bech32m base16_ <<< 706174617465
    base16_1wpshgct5v5kgt2jd

    $ bech32m base58_ <<< Ae2tdPwUPEYy
    base58_1p58rejhd9592uusgm3whg

    $ bech32m new_prefix <<< old_prefix1wpshgct5v5frd79v
    new_prefix1wpshgct5v52ycf9c

  From Bech32m:
    $ bech32m <<< base16_1wpshgct5v5kgt2jd
    706174617465
"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bech32m",
        description="Convert to and from bech32m strings. Data are read from standard input.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EXAMPLES,
    )
    parser.add_argument(
        "prefix",
        metavar="PREFIX",
        nargs="?",
        help="An optional human-readable prefix (e.g. 'addr'). When provided, the input text is decoded "
             "from various encoding formats and re-encoded to bech32m using the given prefix. "
             "When omitted, the input text is decoded from bech32m to base16.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def read_input(stream) -> Result:
    """Reads and trims the first line of `stream`."""
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as e:
        return Result(False, error=f"Error reading input: {e}", kind=ErrorKind.StdinReadError)
    text = line.strip()
    if not text:
        return Result(False, error="No input provided", kind=ErrorKind.EmptyInput)
    return Result(True, text)


def main(argv=None, stdin=None):
    args = build_parser().parse_args(argv)

    result = read_input(stdin if stdin is not None else sys.stdin)
    if not result.success:
        print(result.error, file=sys.stderr)
        return 1

    if args.prefix is not None:
        result = encode(result.data, args.prefix)
    else:
        result = decode(result.data)

    if not result.success:
        logger.debug(f"Conversion failed: {result.kind}")
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    print(result.data)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
