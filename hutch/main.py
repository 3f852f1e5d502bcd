# HUTCH STATELESS PASSWORD GENERATOR ->

import logging
import sys

import colorama

from .entry import SecretEntry
from .errors import HutchError
from .pipeline import DerivationPipeline
from .scheme import HUTCH_V1
from .sites import SiteIdentifier
from .version import __version__

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s -> %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _ask(prompt: str) -> str:
    # prompts go to stderr so --plain output stays machine readable
    print(prompt, end="", file=sys.stderr, flush=True)
    return sys.stdin.readline().rstrip("\r\n")


def cli(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog="hutch", description="Hutch - Stateless Password Generator")
    parser.add_argument(
        "-s", "--site",
        default=None,
        help="Website as an absolute URL, e.g. https://example.com (prompted when omitted)"
    )
    parser.add_argument(
        "-a", "--account",
        default=None,
        help="Account name, case sensitive (prompted when omitted)"
    )
    parser.add_argument(
        "--secret-stdin",
        action="store_true",
        help="Read the master password from the next stdin line instead of a masked prompt"
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print only the generated password"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log derivation stages to stderr"
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    colorama.init()

    if not args.plain:
        print(f"Hutch - Stateless Password Generator v{__version__}")

    try:
        site = args.site if args.site is not None else _ask("Enter Website >")
        host = SiteIdentifier.host(site)
        account = args.account if args.account is not None else _ask("Enter Account (Case Sensitive!) >")
        if args.secret_stdin:
            secret = SecretEntry.read_line(sys.stdin, HUTCH_V1)
        else:
            secret = SecretEntry.prompt(scheme=HUTCH_V1)
        with secret:
            password = DerivationPipeline(HUTCH_V1).run(secret, host, account)
    except HutchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.plain:
        print(password)
        return 0
    print()
    print(f'Generated Password for the site "{host}" with account "{account}" is : ', end="")
    print(colorama.Back.WHITE + colorama.Fore.RED + password + colorama.Style.RESET_ALL)
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
