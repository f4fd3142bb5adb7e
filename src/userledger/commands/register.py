"""
Register command implementation for userledger CLI.
"""
from .base import BaseCommand


class RegisterCommand(BaseCommand):
    """Command to validate and store a new user."""

    def execute(self) -> int:
        """Execute the register command."""
        result = self.service.register(
            self.args.full_name,
            self.args.age,
            self.args.phone,
            self.args.email
        )

        if result.success:
            record = result.record
            print(f"✅ Registered: {record.full_name}")
            print(f"   Phone: {record.phone}")
            print(f"   Email: {record.email}")
            print(f"   Age: {record.age}")
            return 0

        if result.duplicate:
            print("⚠️  User with the same full name, phone or email already exists")
            return 1

        print("❌ Registration rejected:")
        for field, reason in result.errors.items():
            print(f"   {field}: {reason}")
        return 1

    @classmethod
    def add_arguments(cls, parser):
        """Add command-specific arguments to the parser."""
        parser.add_argument(
            "--full-name", "-n",
            required=True,
            help="Full name (Cyrillic or Latin letters, spaces, hyphens)"
        )
        parser.add_argument(
            "--age", "-a",
            required=True,
            help="Age in years, 1 to 150"
        )
        parser.add_argument(
            "--phone", "-p",
            required=True,
            help="Phone number in the form +79XXXXXXXXX"
        )
        parser.add_argument(
            "--email", "-e",
            required=True,
            help="Email address"
        )

    @classmethod
    def help(cls) -> str:
        """Return help text for the command."""
        return "Validate and register a user"
