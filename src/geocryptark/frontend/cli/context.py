"""Small helper to build the runtime context for the GeoCryptArk CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import getpass
import logging
import os

from geocryptark.core.exceptions import ConfigurationError
from geocryptark.frontend.cli.logging_config import parse_level
from geocryptark.security.provider import CryptoProvider, get_provider

PASSWORD_ENV = "GEOCRYPTARK_COMMON_PASSWORD"
LOG_LEVEL_ENV = "GEOCRYPTARK_LOG_LEVEL"


@dataclass
class AppContext:
    """Container for runtime objects the commands need."""

    provider: CryptoProvider
    log_level: int = logging.WARNING
    common_password: Optional[str] = None


def resolve_log_level(cli_level: Optional[str] = None) -> int:
    name = cli_level or os.getenv(LOG_LEVEL_ENV) or "WARNING"
    try:
        return parse_level(name)
    except ValueError as e:
        raise ConfigurationError(str(e)) from None


def resolve_password(cli_password: Optional[str] = None, prompt: bool = True) -> str:
    """
    Pick the common password.

    Order: explicit ``--password``, then ``GEOCRYPTARK_COMMON_PASSWORD``, then an
    interactive ``getpass`` prompt when ``prompt`` is true.
    """
    if cli_password:
        return cli_password
    env_password = os.getenv(PASSWORD_ENV)
    if env_password:
        return env_password
    if prompt:
        entered = getpass.getpass("Common password: ")
        if entered:
            return entered
    raise ConfigurationError(
        f"A common password is required; pass --password or set {PASSWORD_ENV}"
    )


def build_context(
    log_level: Optional[str] = None,
    password: Optional[str] = None,
    need_password: bool = False,
    provider: Optional[CryptoProvider] = None,
) -> AppContext:
    """Resolve configuration from CLI values and the environment."""
    ctx = AppContext(
        provider=provider if provider is not None else get_provider(),
        log_level=resolve_log_level(log_level),
    )
    if need_password:
        ctx.common_password = resolve_password(password)
    return ctx
