"""
Serve command implementation for userledger CLI.
"""
from .base import BaseCommand


class ServeCommand(BaseCommand):
    """Command to run the HTTP API."""

    def execute(self) -> int:
        """Execute the serve command."""
        from ..api_server import run_server

        run_server(host=self.args.host, port=self.args.port, config=self.config)
        return 0

    @classmethod
    def add_arguments(cls, parser):
        """Add command-specific arguments to the parser."""
        parser.add_argument(
            "--host",
            default="127.0.0.1",
            help="Bind address (default: 127.0.0.1)"
        )
        parser.add_argument(
            "--port",
            type=int,
            default=8000,
            help="Port (default: 8000)"
        )

    @classmethod
    def help(cls) -> str:
        """Return help text for the command."""
        return "Run the registration HTTP API"
