"""Exceptions for use in Carca Manager"""

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

from typing import Optional

# ========== Base Application Exception ==========


class CarcaManagerException(Exception):
    """Base exception for all Carca Manager errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Fixture Exceptions ==========


class FixtureException(CarcaManagerException):
    """Base exception for fixture-related errors."""

    pass


class FixtureParseException(FixtureException):
    """Raised when fixture text cannot be parsed.

    Attributes
    ----------
    line_number : int or None
        1-based line of the offending row in the source text, when known.
    block_index : int or None
        0-based index of the round block being parsed, when known.
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        block_index: Optional[int] = None,
    ):
        self.reason = message
        self.line_number = line_number
        self.block_index = block_index
        super().__init__(self._format())

    def _format(self) -> str:
        location = []
        if self.block_index is not None:
            location.append(f"round block {self.block_index + 1}")
        if self.line_number is not None:
            location.append(f"line {self.line_number}")
        if location:
            return f"{', '.join(location)}: {self.reason}"
        return self.reason

    def locate(
        self, line_number: Optional[int] = None, block_index: Optional[int] = None
    ) -> "FixtureParseException":
        """Return a copy of this error with missing location fields filled in."""
        return FixtureParseException(
            self.reason,
            line_number=self.line_number if self.line_number is not None else line_number,
            block_index=self.block_index if self.block_index is not None else block_index,
        )


class FixtureLoadException(FixtureException):
    """Raised when a fixture file cannot be read."""

    pass


# ========== API Exceptions ==========


class APIException(CarcaManagerException):
    """Base exception for errors talking to BoardGameArena."""

    pass


class AuthenticationException(APIException):
    """Raised when logging in to BoardGameArena fails."""

    pass


class NotAuthenticatedException(AuthenticationException):
    """Raised when a request needs a session and the client has none."""

    pass


class NetworkException(APIException):
    """Raised when there's a network connectivity error."""

    pass


class TournamentCreationException(APIException):
    """Raised when BoardGameArena answers a creation request with an error status."""

    pass


class TournamentNotFoundException(APIException):
    """Raised when a requested tournament does not exist."""

    pass


class InvalidTournamentLinkException(APIException):
    """Raised when a tournament link carries no usable id."""

    pass


# ========== Credential Exceptions ==========


class CredentialsException(CarcaManagerException):
    """Raised when BoardGameArena credentials cannot be obtained."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CarcaManagerException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
