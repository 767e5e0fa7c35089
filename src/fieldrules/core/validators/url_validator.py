"""
URL rules - url and urlActive.

``urlActive`` is the only rule that performs network I/O. The DNS lookup runs
on a worker thread bounded by a timeout; a timeout or resolution error is a
failed check, never an exception.
"""

import os
import socket
import threading
from collections.abc import Callable, Mapping, Sequence
from typing import Any
from urllib.parse import urlsplit

from pydantic import AnyUrl, TypeAdapter, ValidationError

from fieldrules.observability.logger import get_logger

from .base_validator import BaseRule

logger = get_logger(__name__)

VALID_URL_PREFIXES = ("http://", "https://", "ftp://")

DEFAULT_DNS_TIMEOUT = 2.0

_url_adapter = TypeAdapter(AnyUrl)


def _has_valid_prefix(value: Any) -> bool:
    return isinstance(value, str) and value.lower().startswith(VALID_URL_PREFIXES)


def default_resolver(host: str) -> bool:
    """Return True if ``host`` has at least one address record."""
    return bool(socket.getaddrinfo(host, None))


class UrlRule(BaseRule):
    """
    Validates that a field is a well-formed URL.

    The value must begin with http://, https:// or ftp:// and parse as a URL
    with a host.
    """

    rule_type = "url"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        if not _has_valid_prefix(value):
            return False
        try:
            url = _url_adapter.validate_python(value)
        except ValidationError:
            return False
        return bool(url.host)


class UrlActiveRule(BaseRule):
    """
    Validates that a URL's host has a resolvable DNS record.

    Parameters (constructor):
    - resolver: callable taking a host name and returning a bool; defaults to
      a ``socket.getaddrinfo`` lookup
    - timeout: seconds to wait for the resolver (defaults to env var
      FIELDRULES_DNS_TIMEOUT or 2.0)
    """

    rule_type = "urlActive"

    def __init__(self, resolver: Callable[[str], bool] | None = None, timeout: float | None = None):
        self.resolver = resolver or default_resolver
        self.timeout = timeout

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        if not _has_valid_prefix(value):
            return False

        try:
            host = urlsplit(value.lower()).hostname
        except ValueError:
            return False
        if not host:
            return False

        return self._resolve(host)

    def _resolve(self, host: str) -> bool:
        timeout = self.timeout or dns_timeout()

        outcome: dict[str, Any] = {}

        def lookup() -> None:
            try:
                outcome["resolved"] = bool(self.resolver(host))
            except Exception as e:
                outcome["error"] = e

        # Daemon thread so a hung lookup never holds up interpreter exit
        worker = threading.Thread(target=lookup, name=f"fieldrules-dns-{host}", daemon=True)
        worker.start()
        worker.join(timeout)

        if worker.is_alive():
            logger.warning(f"DNS lookup for '{host}' timed out after {timeout}s")
            return False
        if "error" in outcome:
            logger.warning(f"DNS lookup for '{host}' failed: {outcome['error']}")
            return False
        return outcome.get("resolved", False)


def dns_timeout() -> float:
    """Lookup timeout from FIELDRULES_DNS_TIMEOUT, or the default for unset or invalid values."""
    raw = os.getenv("FIELDRULES_DNS_TIMEOUT")
    if raw is None:
        return DEFAULT_DNS_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Invalid FIELDRULES_DNS_TIMEOUT '{raw}', using {DEFAULT_DNS_TIMEOUT}s")
        return DEFAULT_DNS_TIMEOUT
    if not timeout > 0:
        logger.warning(f"FIELDRULES_DNS_TIMEOUT must be positive, using {DEFAULT_DNS_TIMEOUT}s")
        return DEFAULT_DNS_TIMEOUT
    return timeout
