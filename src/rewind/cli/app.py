"""Main CLI application wiring for rewind.

  rewind replay set:B set:C undo --initial A
  rewind config
"""

import typer

app = typer.Typer(add_completion=False, help="rewind: linear undo/redo history")


@app.callback()
def main():
    """rewind CLI."""
    pass


# =============================================================================
# Top-level commands
# =============================================================================

from rewind.cli import replay as replay_cmd
from rewind.cli import show_config as show_config_cmd

replay_cmd.register(app)
show_config_cmd.register(app)
