#!/usr/bin/env python3
"""
Convenience script for running Alembic migrations.

Usage:
    python migrate.py current           # Show current migration
    python migrate.py upgrade head      # Apply all migrations
    python migrate.py downgrade -1      # Downgrade one migration
    python migrate.py revision -m "Description"  # Create new migration (--autogenerate is automatic)
    python migrate.py history           # Show migration history
"""

import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)


def build_command(args: list[str]) -> list[str]:
    """Build the alembic command line, adding --autogenerate to revisions."""
    config_path = Path(__file__).parent / "migrations" / "alembic.ini"
    args = list(args)
    if args and args[0] == "revision" and "--autogenerate" not in args:
        args.insert(1, "--autogenerate")
    return [sys.executable, "-m", "alembic", "-c", str(config_path)] + args


def main() -> None:
    """Run alembic command with the correct config file."""
    try:
        result = subprocess.run(build_command(sys.argv[1:]), check=False)
        sys.exit(result.returncode)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        sys.exit(1)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    main()
