"""
List command implementation for userledger CLI.
"""
import json
from .base import BaseCommand


class ListCommand(BaseCommand):
    """Command to list all stored users."""

    def execute(self) -> int:
        """Execute the list command."""
        records = self.service.list_users()
        total = len(records)

        if self.args.limit:
            records = records[:self.args.limit]

        if self.args.format == "json":
            output = [record.to_dict() for record in records]
            print(json.dumps(output, indent=2, ensure_ascii=False))
        else:
            self._display_table(records, total)

        return 0

    def _display_table(self, records, total):
        """Display records in table format."""
        if not records:
            print("No users registered")
            return

        name_width = max(len("Full name"), *(len(r.full_name) for r in records))
        email_width = max(len("Email"), *(len(r.email) for r in records))

        print(f"{'Full name':<{name_width}}  {'Phone':<12}  {'Email':<{email_width}}  Age")
        print("-" * (name_width + email_width + 23))
        for record in records:
            print(f"{record.full_name:<{name_width}}  {record.phone:<12}  "
                  f"{record.email:<{email_width}}  {record.age}")

        if len(records) < total:
            print(f"\nShowing {len(records)} of {total} users")

    @classmethod
    def add_arguments(cls, parser):
        """Add command-specific arguments to the parser."""
        parser.add_argument(
            "--format",
            choices=["table", "json"],
            default="table",
            help="Output format (default: table)"
        )
        parser.add_argument(
            "--limit",
            type=int,
            help="Maximum number of users to show"
        )

    @classmethod
    def help(cls) -> str:
        """Return help text for the command."""
        return "List registered users"
