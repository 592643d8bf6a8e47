"""emailmask CLI - Command line interface for masking email addresses.

Usage:
    emailmask ADDRESS [ADDRESS ...] [options]
    emailmask [options] < addresses.txt
    emailmask --text [options] < app.log

Examples:
    # Mask a single address
    emailmask ekaone3033@gmail.com

    # Show one character and mask the domain too
    emailmask -n 1 --mask-domain contact@mail.google.com

    # Mask every address inside a log file
    emailmask --text < app.log > app.masked.log
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from emailmask.__version__ import __version__
from emailmask.errors import ConfigurationError, EmailMaskError, format_error
from emailmask.masker import EmailMasker

logger = logging.getLogger(__name__)


def print_error(message: str):
    """Print an error message."""
    print(f"error: {message}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="emailmask",
        description="Partially obscure email addresses for display.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  emailmask user@gmail.com                      # us**@gmail.com
  emailmask -d user@gmail.com                   # us**@g****.com
  emailmask -n 0 -c '#' test@example.com        # ####@example.com
  emailmask --text < app.log                    # mask addresses inside text
""",
    )

    parser.add_argument(
        "addresses",
        nargs="*",
        metavar="ADDRESS",
        help="Addresses to mask (default: read one per line from stdin)",
    )
    parser.add_argument(
        "-c",
        "--mask-char",
        default="*",
        help="Filler used for hidden characters (default: '*')",
    )
    parser.add_argument(
        "-n",
        "--visible-chars",
        type=int,
        default=2,
        help="Leading characters of the local part to keep (default: 2)",
    )
    parser.add_argument(
        "-d",
        "--mask-domain",
        action="store_true",
        help="Also mask domain labels, keeping the top-level domain",
    )
    parser.add_argument(
        "--viewable",
        action="store_true",
        help="Print addresses unmasked",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Treat input as free text and mask every address found in it",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def setup_logging(verbose: bool) -> None:
    """Configure logging for command line use."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("emailmask").setLevel(logging.DEBUG)


def iter_input(addresses: List[str], stdin: TextIO) -> Iterable[str]:
    """Yield input values from arguments, or from stdin lines."""
    if addresses:
        yield from addresses
        return

    for line in stdin:
        yield line.rstrip("\r\n")


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    """Mask every input value and write one result per line."""
    masker = EmailMasker(
        strict=True,
        mask_char=args.mask_char,
        visible_chars=args.visible_chars,
        mask_domain=args.mask_domain,
        viewable=args.viewable,
    )
    transform = masker.mask_text if args.text else masker.mask

    for value in iter_input(args.addresses, stdin):
        stdout.write(f"{transform(value)}\n")

    logger.debug(f"Done: {masker.get_stats()}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        return run(args, sys.stdin, sys.stdout)
    except ConfigurationError as e:
        print_error(format_error(e))
        print_error("Run `emailmask --help` for the available options.")
        return 1
    except EmailMaskError as e:
        print_error(format_error(e))
        return 1
    except KeyboardInterrupt:
        print("\nCancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
