from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from rewind.config import load_settings
from rewind.errors import ConfigError


def register(app: typer.Typer) -> None:
    @app.command()
    def config(
        path: Optional[Path] = typer.Option(
            None, "--config", "-c", help="Path to a rewind YAML config"
        ),
    ) -> None:
        """Show the effective settings."""
        try:
            settings = load_settings(path)
        except ConfigError as e:
            print(f"Error: {e}")
            raise typer.Exit(1)

        source = settings.source or "(defaults)"
        print(f"source:    {source}")
        print(f"equality:  {settings.equality}")
        print(f"log level: {settings.log_level}")
