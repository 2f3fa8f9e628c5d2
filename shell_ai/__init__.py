"""
shell_ai package

Command-line client that sends a natural-language request to the shell-ai
completion service and prints the suggested command. Use `python -m shell_ai`
or import `shell_ai.cli.main` as the CLI entrypoint.
"""

__all__ = ["cli"]
__version__ = "0.1.0"
