"""
rewind CLI entrypoint.

Executed via:
  python -m rewind
"""

from rewind.cli.app import app

if __name__ == "__main__":
    app()
