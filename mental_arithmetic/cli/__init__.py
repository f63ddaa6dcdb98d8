"""Terminal front-end (typer + rich)."""
