"""Local hostname lookup."""

import logging
import socket
from typing import Protocol

logger = logging.getLogger(__name__)


class HostnameResolver(Protocol):
    def resolve(self, canonical: bool) -> str:
        ...


class LocalHostnameResolver:
    """Resolves this machine's hostname through the system name service.

    Calls block with no timeout of their own.
    """

    def resolve(self, canonical: bool) -> str:
        """Return the short hostname, or the fully qualified one if canonical.

        Raises:
            OSError: If the local hostname is unset or does not resolve.
        """
        name = socket.gethostname()
        if not name:
            raise socket.gaierror("local hostname is not configured")
        address = socket.gethostbyname(name)
        if not canonical:
            return name
        try:
            return socket.gethostbyaddr(address)[0]
        except OSError:
            logger.debug("Reverse lookup of %s failed, using address", address)
            return address
