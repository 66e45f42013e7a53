"""Application configuration."""

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
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from carcamanager.constants import (
    BGA_BASE_URL,
    BGA_REQUEST_TIMEOUT,
    DEFAULT_DATA_DIR,
    DEFAULT_ENV_FILE,
    DEFAULT_LOG_FILE,
)
from carcamanager.exceptions import InvalidConfigurationException

ENV_PREFIX = "CARCA_"
TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    """Runtime settings.

    Attributes
    ----------
    data_dir : Path
        Directory holding the ``*-Fixture.csv`` files.
    env_file : Path
        ``.env`` file with BGA credentials and ``CARCA_*`` settings.
    base_url : str
        BoardGameArena site root.
    request_timeout : float
        HTTP timeout in seconds.
    use_mock : bool
        Use the in-memory client instead of the live site.
    log_file : Path
        Where logs go while the full-screen UI runs.
    log_level : str
        Logging level name.
    """

    data_dir: Path = Path(DEFAULT_DATA_DIR)
    env_file: Path = Path(DEFAULT_ENV_FILE)
    base_url: str = BGA_BASE_URL
    request_timeout: float = BGA_REQUEST_TIMEOUT
    use_mock: bool = False
    log_file: Path = Path(DEFAULT_LOG_FILE)
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data_dir": str(self.data_dir),
            "env_file": str(self.env_file),
            "base_url": self.base_url,
            "request_timeout": self.request_timeout,
            "use_mock": self.use_mock,
            "log_file": str(self.log_file),
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppConfig":
        defaults = cls()
        try:
            timeout = float(data.get("request_timeout", defaults.request_timeout))
        except (TypeError, ValueError):
            raise InvalidConfigurationException(
                f"request_timeout must be a number, got {data.get('request_timeout')!r}"
            ) from None
        if timeout <= 0:
            raise InvalidConfigurationException("request_timeout must be positive")

        use_mock = data.get("use_mock", defaults.use_mock)
        if isinstance(use_mock, str):
            use_mock = use_mock.strip().lower() in TRUE_VALUES

        return cls(
            data_dir=Path(data.get("data_dir", defaults.data_dir)),
            env_file=Path(data.get("env_file", defaults.env_file)),
            base_url=str(data.get("base_url", defaults.base_url)),
            request_timeout=timeout,
            use_mock=bool(use_mock),
            log_file=Path(data.get("log_file", defaults.log_file)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
        )

    @classmethod
    def from_env(
        cls,
        env_file: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "AppConfig":
        """Build from ``CARCA_*`` variables; the environment wins over the file.

        ``CARCA_DATA_DIR`` sets ``data_dir``, ``CARCA_USE_MOCK`` sets
        ``use_mock`` and so on.
        """
        env_file = Path(env_file or DEFAULT_ENV_FILE)
        environ = os.environ if environ is None else environ

        values: Dict[str, Any] = {}
        if env_file.is_file():
            values.update(_prefixed(dotenv_values(env_file)))
        values.update(_prefixed(environ))
        values["env_file"] = env_file
        return cls.from_dict(values)


def _prefixed(source: Mapping[str, Optional[str]]) -> Dict[str, str]:
    return {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in source.items()
        if key.startswith(ENV_PREFIX) and value is not None
    }
