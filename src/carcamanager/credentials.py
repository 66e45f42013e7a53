"""BoardGameArena credential providers."""

# Carca Manager
# Copyright (C) 2025  Carca Manager developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Union

from dotenv import dotenv_values, set_key
from prompt_toolkit import prompt

from carcamanager.constants import BGA_PASS_ENV, BGA_USER_ENV, DEFAULT_ENV_FILE
from carcamanager.exceptions import CredentialsException
from carcamanager.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Credentials:
    """BoardGameArena login.

    Attributes
    ----------
    username : str
        Account e-mail or nickname.
    password : str
        Account password.
    """

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"

    @property
    def complete(self) -> bool:
        return bool(self.username and self.password)


class CredentialProvider(ABC):
    """Source of BoardGameArena credentials handed to the submission flow."""

    @abstractmethod
    def get_credentials(self, allow_prompt: bool = False) -> Credentials:
        """Return credentials or raise :class:`CredentialsException`.

        Args:
            allow_prompt: Whether the provider may ask the user on the
                terminal. Must be False while the full-screen UI is running.
        """


class StaticCredentialProvider(CredentialProvider):
    """Always returns the credentials it was built with."""

    def __init__(self, username: str, password: str):
        self._credentials = Credentials(username, password)

    def get_credentials(self, allow_prompt: bool = False) -> Credentials:
        if not self._credentials.complete:
            raise CredentialsException("username and password are required")
        return self._credentials


# Prompt signature: (message, is_password) -> answer
PromptFunc = Callable[[str, bool], str]


def _terminal_prompt(message: str, is_password: bool) -> str:
    return prompt(message, is_password=is_password)


class EnvCredentialProvider(CredentialProvider):
    """Read ``BGA_USER``/``BGA_PASS`` from the environment or a ``.env`` file.

    Environment variables take precedence over the file. When both are
    missing and prompting is allowed, the user is asked once; the answer is
    cached for the rest of the session and, with ``save_prompted``, written
    back to the ``.env`` file.
    """

    def __init__(
        self,
        env_file: Optional[Union[str, Path]] = DEFAULT_ENV_FILE,
        environ: Optional[Mapping[str, str]] = None,
        prompt_func: Optional[PromptFunc] = None,
        save_prompted: bool = False,
    ):
        self.env_file = Path(env_file) if env_file else None
        self._environ = environ if environ is not None else os.environ
        self._prompt = prompt_func or _terminal_prompt
        self.save_prompted = save_prompted
        self._cached: Optional[Credentials] = None

    def _file_values(self) -> Dict[str, str]:
        if self.env_file is None or not self.env_file.is_file():
            return {}
        return {k: v for k, v in dotenv_values(self.env_file).items() if v}

    def _lookup(self) -> Credentials:
        file_values = self._file_values()
        username = self._environ.get(BGA_USER_ENV) or file_values.get(BGA_USER_ENV, "")
        password = self._environ.get(BGA_PASS_ENV) or file_values.get(BGA_PASS_ENV, "")
        return Credentials(username, password)

    def get_credentials(self, allow_prompt: bool = False) -> Credentials:
        if self._cached is not None:
            return self._cached

        credentials = self._lookup()
        if credentials.complete:
            logger.debug("Using BGA credentials for %s", credentials.username)
            return credentials

        if not allow_prompt:
            raise CredentialsException(
                f"{BGA_USER_ENV} and {BGA_PASS_ENV} must be set in the environment "
                f"or in {self.env_file or 'a .env file'}"
            )

        credentials = self._ask(credentials)
        self._cached = credentials
        if self.save_prompted and self.env_file is not None:
            save_credentials_to_env(credentials, self.env_file)
        return credentials

    def _ask(self, known: Credentials) -> Credentials:
        try:
            username = known.username or self._prompt("BGA username: ", False).strip()
            password = known.password or self._prompt("BGA password: ", True)
        except (EOFError, KeyboardInterrupt) as e:
            raise CredentialsException("credential prompt aborted") from e

        credentials = Credentials(username, password)
        if not credentials.complete:
            raise CredentialsException("username and password are required")
        return credentials


def save_credentials_to_env(
    credentials: Credentials, env_file: Union[str, Path] = DEFAULT_ENV_FILE
) -> None:
    """Store credentials in a ``.env`` file, creating it when missing."""
    env_file = Path(env_file)
    try:
        env_file.touch(exist_ok=True)
        set_key(str(env_file), BGA_USER_ENV, credentials.username)
        set_key(str(env_file), BGA_PASS_ENV, credentials.password)
    except OSError as e:
        raise CredentialsException(f"failed to save credentials: {e}") from e
    logger.info("Saved BGA credentials to %s", env_file)
