"""HTTP settings used when fetching RoboHash avatars."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

from robohash_client import __version__
from robohash_client.protocol.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 10.0
_DEFAULT_USER_AGENT = f"robohash-client/{__version__}"


@dataclass
class ClientConfig:
    """Configuration for the HTTP side of a RoboHash client.

    ``timeout`` and ``user_agent`` can be overridden via environment
    variables (``ROBOHASH_TIMEOUT``, ``ROBOHASH_USER_AGENT``) or
    constructor arguments.

    Priority (highest wins): constructor arg > env var > default.
    """

    timeout: float | None = None
    user_agent: str | None = None
    follow_redirects: bool = True

    def __post_init__(self) -> None:
        if self.timeout is None:
            env_timeout = os.getenv("ROBOHASH_TIMEOUT")
            if env_timeout:
                try:
                    self.timeout = float(env_timeout)
                except ValueError:
                    raise InvalidArgumentError(
                        f"ROBOHASH_TIMEOUT must be a number, got {env_timeout!r}"
                    ) from None
            else:
                self.timeout = _DEFAULT_TIMEOUT

        # bool is an int subclass but never a meaningful timeout
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise InvalidArgumentError(
                f"timeout must be a number, got {self.timeout!r}"
            )
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise InvalidArgumentError(
                f"Invalid timeout {self.timeout}. Must be a finite number greater than zero."
            )

        if self.user_agent is None:
            self.user_agent = os.getenv("ROBOHASH_USER_AGENT") or _DEFAULT_USER_AGENT

        logger.debug(
            "ClientConfig timeout=%s user_agent=%s follow_redirects=%s",
            self.timeout,
            self.user_agent,
            self.follow_redirects,
        )
