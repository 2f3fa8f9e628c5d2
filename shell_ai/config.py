"""
Configuration constants for shell_ai.
Endpoint, environment variable and user-facing message strings live here
so the client and the CLI agree on them.
"""

from __future__ import annotations

SHELL_AI_URL = "https://shell-ai.deno.dev"
KEY_ENV_VAR = "SHELL_AI_KEY"

# Name users are told to install the executable under
COMMAND_NAME = "q"
INSTALL_DIR = "~/CustomBin/bin"

USAGE = f"usage: {COMMAND_NAME} desired command text"

MSG_COMMAND_FAILED = "error: command failed"
MSG_UNPARSEABLE = "error: unable to parse response"
MSG_NO_COMPLETION = "error: response did not include a completion"
