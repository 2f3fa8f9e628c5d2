"""
Credential lookup and first-run onboarding text.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from .config import COMMAND_NAME, INSTALL_DIR, KEY_ENV_VAR

BANNER = "=" * 54


def read_user_key(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the user key, or None when the variable is not set at all."""
    env = os.environ if environ is None else environ
    return env.get(KEY_ENV_VAR)


def onboarding_text(exec_path: str) -> str:
    """Greeting shown when the key is missing."""
    lines = [
        BANNER,
        "Hello!".center(len(BANNER)).rstrip(),
        BANNER,
        "",
        f"You're seeing this greeting because the {KEY_ENV_VAR}",
        "environment variable is not set. Make sure to set it",
        "to your user key with the following command:",
        "",
        f'  export {KEY_ENV_VAR}="[insert key here]"',
        "",
        "To avoid having to do this in future terminal sessions,",
        "you can also add the above line to your .zshrc or",
        ".bashrc!",
        "",
        "I recommend putting this executable in a bin, and",
        f"renaming it to '{COMMAND_NAME}' (or some other easy command). You",
        "can do that like this:",
        "",
        f"  mkdir -p {INSTALL_DIR}",
        f"  mv {exec_path} {INSTALL_DIR}/{COMMAND_NAME}",
        f"  export PATH=$PATH:{INSTALL_DIR}",
        "",
        "You should add that last line to your .zshrc or",
        ".bashrc as well!",
        "",
        "(If you don't have a user key, ask whoever runs your shell-ai service!)",
    ]
    return "\n".join(lines)
