"""Main CLI entry point for userledger using command pattern."""

import sys
import argparse
import logging
from typing import Optional

from .commands import COMMAND_REGISTRY, CommandContext
from .exceptions import UserLedgerError
from .services import ConfigurationService, RegistrationService, create_store
from .utils import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="userledger",
        description="userledger - User registration validation and storage"
    )
    parser.add_argument(
        "--store", "-s",
        help="Path to the user store file (overrides configuration)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to a JSON configuration file"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (overrides configuration)"
    )

    subparsers = parser.add_subparsers(
        title="Available commands",
        dest="command",
        required=True
    )

    for name, command_class in COMMAND_REGISTRY.items():
        subparser = subparsers.add_parser(name, help=command_class.help())
        command_class.add_arguments(subparser)

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigurationService(args.config).get_config()
    except UserLedgerError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.store:
        config.store.store_path = args.store
    if args.log_level:
        config.log_level = args.log_level

    setup_logging(config.log_level)

    service = RegistrationService(create_store(config.store))
    context = CommandContext(service=service, config=config, args=args)

    command = COMMAND_REGISTRY[args.command](context)

    try:
        return command.execute()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1
    except UserLedgerError as e:
        logging.error(f"❌ {e}")
        return 1


def cli_main():
    """Synchronous CLI entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
