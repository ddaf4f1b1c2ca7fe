"""Command line entry point for jwt-kit."""

import argparse
import logging
import sys

from jwt_kit import __version__
from jwt_kit.claims.types import IssueConfig
from jwt_kit.core.errors import JwtKitError
from jwt_kit.core.logs import configure_logging
from jwt_kit.core.settings import KitSettings, load_settings
from jwt_kit.crypto.keys import ISSUER, JWKS_URL, build_jwks
from jwt_kit.issue.token_service import mint

ERROR_PREFIX = "Whoops. There was an error while executing your CLI"

DESCRIPTION = "jwt-kit - a simple CLI to generate JWTs using a development IDP"
EPILOG = f"""\
Jwt-kit contains an embedded keypair used to sign jwts.

Public JWKS url: {JWKS_URL}

Issuer name: {ISSUER}
"""

logger = logging.getLogger(__name__)


def _report(exc: JwtKitError) -> int:
    print(f"{ERROR_PREFIX} '{exc}'", file=sys.stderr)
    return 1


def build_parser(settings: KitSettings) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from settings."""
    parser = argparse.ArgumentParser(
        prog="jwt-kit",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c", "--claims", action="append", metavar="KEY=VALUE", help="add jwt claims"
    )
    parser.add_argument("-s", "--scopes", action="append", help="add jwt scopes")
    # no default here: -a replaces the settings audiences rather than extending them
    parser.add_argument(
        "-a",
        "--audiences",
        action="append",
        help=f"jwt audience (default: {', '.join(settings.audiences)})".replace("%", "%%"),
    )
    parser.add_argument(
        "-e",
        "--expires-in",
        default=settings.expires_in,
        help=(
            "expires duration such as 1h30m or 90s; write negative values "
            "as -e=-1h (default: %(default)s)"
        ),
    )
    parser.add_argument(
        "-u", "--subject", default=settings.subject, help="jwt subject (default: %(default)s)"
    )
    parser.add_argument(
        "-p", "--pretty-print", action="store_true", help="pretty print the token"
    )
    parser.add_argument(
        "--jwks",
        action="store_true",
        help="print the JWKS document for the embedded key and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run jwt-kit and return the process exit status."""
    try:
        settings = load_settings()
    except JwtKitError as exc:
        return _report(exc)
    args = build_parser(settings).parse_args(argv)
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        if args.jwks:
            sys.stdout.write(f"{build_jwks().model_dump_json(indent=2)}\n")
            return 0
        config = IssueConfig(
            claims=args.claims or [],
            scopes=args.scopes or [],
            audiences=args.audiences or settings.audiences,
            expires_in=args.expires_in,
            subject=args.subject,
            pretty_print=args.pretty_print,
        )
        output = mint(config)
    except JwtKitError as exc:
        logger.debug("issuance failed", exc_info=exc)
        return _report(exc)

    sys.stdout.write(output)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
