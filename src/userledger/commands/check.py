"""
Check command implementation for userledger CLI.
"""
from .base import BaseCommand
from ..validators import FIELD_VALIDATORS


class CheckCommand(BaseCommand):
    """Command to validate a single field without storing anything."""

    def execute(self) -> int:
        """Execute the check command."""
        accepted, reason = FIELD_VALIDATORS[self.args.field](self.args.value)

        if accepted:
            print(f"✅ {self.args.field} is valid")
            return 0

        print(f"❌ {self.args.field}: {reason}")
        return 1

    @classmethod
    def add_arguments(cls, parser):
        """Add command-specific arguments to the parser."""
        parser.add_argument(
            "field",
            choices=list(FIELD_VALIDATORS),
            help="Field to validate"
        )
        parser.add_argument(
            "value",
            help="Value to validate"
        )

    @classmethod
    def help(cls) -> str:
        """Return help text for the command."""
        return "Validate a single field value"
