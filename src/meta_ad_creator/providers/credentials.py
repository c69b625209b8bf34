from __future__ import annotations

import asyncio
import getpass
import logging
import os
import sys

from .base import CredentialSelector

logger = logging.getLogger(__name__)


class EnvCredentialSelector(CredentialSelector):
    """Treats a non-empty API key environment variable as the selected key.

    Selection prompts for a key on an interactive terminal and stores it in the
    environment for the rest of the process.  Without a terminal there is
    nothing to select from and the selection reports failure.
    """

    def __init__(self, api_key_env: str = "GEMINI_API_KEY", interactive: bool | None = None):
        self.api_key_env = api_key_env
        self.interactive = sys.stdin.isatty() if interactive is None else interactive

    async def has_selected_key(self) -> bool:
        return bool(os.getenv(self.api_key_env))

    async def select_key(self) -> bool:
        if not self.interactive:
            logger.warning("No terminal available to select an API key for %s", self.api_key_env)
            return False

        entered = await asyncio.to_thread(getpass.getpass, f"Enter API key for {self.api_key_env}: ")
        entered = entered.strip()
        if not entered:
            logger.warning("No API key entered")
            return False

        os.environ[self.api_key_env] = entered
        logger.info("API key selected for this session")
        return True


class StaticCredentialSelector(CredentialSelector):
    """For backends that never use a key, e.g. the offline mock."""

    async def has_selected_key(self) -> bool:
        return True

    async def select_key(self) -> bool:
        return True
