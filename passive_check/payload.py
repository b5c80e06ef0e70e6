"""Passive check message payload.

A Payload carries one check result (hostname, level, service name, message)
for a transmitter to encode and send to a monitoring collector.
"""

import logging
import zlib

from passive_check.errors import HostResolutionError, InvalidArgument
from passive_check.level import Level, to_level
from passive_check.resolver import HostnameResolver, LocalHostnameResolver

logger = logging.getLogger(__name__)

UNKNOWN_HOSTNAME = "UNKNOWN"
DEFAULT_SERVICE_NAME = "UNDEFINED"

_HASH_SEED = 21
_HASH_MULTIPLIER = 57


def _require_text(value, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgument(f"{name} cannot be None or an empty string")
    return value


def _coerce_level(value) -> Level:
    if isinstance(value, Level):
        return value
    if value is None or isinstance(value, str):
        return to_level(value)
    raise InvalidArgument(f"level must be a Level or level name, got {type(value).__name__}")


def _coerce_message(value) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidArgument(f"message must be a string, got {type(value).__name__}")
    return value


def _text_hash(value: str) -> int:
    return zlib.crc32(value.encode("utf-8", "surrogatepass"))


class Payload:
    """The passive check message payload.

    With no hostname given, the hostname is this machine's short hostname,
    or "UNKNOWN" when use_local_hostname is False. Level defaults to
    UNKNOWN, service name to "UNDEFINED" and message to an empty string.

    Args:
        hostname: Host the check result is reported for.
        level: A Level, or its name in any case.
        service_name: Service the check result is reported for.
        message: Free text output of the check.
        use_local_hostname: Resolve the local hostname when hostname is None.
        resolver: Object with a resolve(canonical) method. Defaults to
            LocalHostnameResolver.

    Raises:
        InvalidArgument: If hostname or service_name is empty.
        HostResolutionError: If the local hostname is needed and cannot be
            resolved.
    """

    def __init__(
        self,
        hostname: str | None = None,
        level: Level | str = Level.UNKNOWN,
        service_name: str = DEFAULT_SERVICE_NAME,
        message: str | None = "",
        *,
        use_local_hostname: bool = True,
        resolver: HostnameResolver | None = None,
    ):
        if hostname is not None:
            hostname = _require_text(hostname, "hostname")
        service_name = _require_text(service_name, "service_name")
        level = _coerce_level(level)
        message = _coerce_message(message)

        self._resolver = resolver if resolver is not None else LocalHostnameResolver()
        self._hostname = hostname if hostname is not None else UNKNOWN_HOSTNAME
        self._level = level
        self._service_name = service_name
        self._message = message

        if hostname is None and use_local_hostname:
            self.use_local_hostname()

    @classmethod
    def from_dict(cls, data: dict, resolver: HostnameResolver | None = None) -> "Payload":
        """Rebuild a Payload from a record produced by to_dict().

        Missing keys take their defaults. The hostname is never resolved.
        """
        return cls(
            hostname=data.get("hostname", UNKNOWN_HOSTNAME),
            level=data.get("level", Level.UNKNOWN),
            service_name=data.get("service_name", DEFAULT_SERVICE_NAME),
            message=data.get("message", ""),
            use_local_hostname=False,
            resolver=resolver,
        )

    def to_dict(self) -> dict:
        return {
            "hostname": self._hostname,
            "level": self._level.name,
            "service_name": self._service_name,
            "message": self._message,
        }

    # ── hostname ──────────────────────────────────────────────────

    @property
    def hostname(self) -> str:
        return self._hostname

    @hostname.setter
    def hostname(self, value: str):
        self._hostname = _require_text(value, "hostname")

    def use_local_hostname(self):
        """Use the short hostname of this machine."""
        self.resolve_local_hostname(canonical=False)

    def resolve_local_hostname(self, canonical: bool = False):
        """Set the hostname from a lookup of this machine's name.

        Args:
            canonical: True for the fully qualified domain name, False for
                the short hostname.

        Raises:
            HostResolutionError: If the lookup fails. The hostname is left
                unchanged.
        """
        try:
            name = self._resolver.resolve(canonical)
        except (OSError, UnicodeError) as exc:
            raise HostResolutionError(exc) from exc
        if not isinstance(name, str) or not name:
            raise HostResolutionError(OSError(f"resolver returned no hostname: {name!r}"))
        self._hostname = name
        logger.debug("Resolved local hostname to %s (canonical=%s)", name, canonical)

    # ── level ─────────────────────────────────────────────────────

    @property
    def level(self) -> Level:
        return self._level

    @level.setter
    def level(self, value: Level | str):
        self._level = _coerce_level(value)

    def set_level(self, value: Level | str):
        """Set the level from a Level or from "ok", "warning", "critical"
        or "unknown" in any case. Other text sets Level.UNKNOWN.
        """
        self.level = value

    # ── service name ──────────────────────────────────────────────

    @property
    def service_name(self) -> str:
        return self._service_name

    @service_name.setter
    def service_name(self, value: str):
        self._service_name = _require_text(value, "service_name")

    # ── message ───────────────────────────────────────────────────

    @property
    def message(self) -> str:
        return self._message

    @message.setter
    def message(self, value: str | None):
        self._message = _coerce_message(value)

    # ── value semantics ───────────────────────────────────────────

    def _fields(self) -> tuple:
        return (self._hostname, self._level, self._service_name, self._message)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Payload):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        total = _HASH_SEED
        for part in (
            _text_hash(self._hostname),
            int(self._level),
            _text_hash(self._service_name),
            _text_hash(self._message),
        ):
            total = (total * _HASH_MULTIPLIER + part) & 0xFFFFFFFF
        return total

    def __repr__(self):
        return (
            f"Payload[level={self._level.name},hostname={self._hostname},"
            f"service_name={self._service_name},message={self._message}]"
        )
