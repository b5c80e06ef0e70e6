"""Configuration module — frozen dataclass loaded from YAML, env vars and CLI args."""

import argparse
import logging
import os
from dataclasses import dataclass, fields

import yaml

logger = logging.getLogger(__name__)


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class PayloadConfig:
    hostname: str = ""
    use_local_hostname: bool = True
    canonical_hostname: bool = False
    level: str = "UNKNOWN"
    service_name: str = "UNDEFINED"
    message: str = ""
    log_level: str = "INFO"
    output_json: bool = False


_BOOL_FIELDS = ("use_local_hostname", "canonical_hostname", "output_json")

_ENV_VARS = {
    "hostname": "PAYLOAD_HOSTNAME",
    "use_local_hostname": "USE_LOCAL_HOSTNAME",
    "canonical_hostname": "CANONICAL_HOSTNAME",
    "level": "PAYLOAD_LEVEL",
    "service_name": "SERVICE_NAME",
    "message": "PAYLOAD_MESSAGE",
    "log_level": "LOG_LEVEL",
    "output_json": "OUTPUT_JSON",
}


def load_yaml_config(path: str | None) -> dict:
    """Load config values from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded YAML config from %s", path)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}
    known = {f.name for f in fields(PayloadConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))
    return {key: value for key, value in data.items() if key in known and value is not None}


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Passive check payload")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to YAML config file")
    parser.add_argument("--hostname", type=str, default=None)
    parser.add_argument("--no-local-hostname", action="store_true", default=False,
                        help="Do not resolve the local hostname; use UNKNOWN")
    parser.add_argument("--canonical", action="store_true", default=False,
                        help="Resolve the fully qualified local hostname")
    parser.add_argument("--level", type=str, default=None,
                        help="ok, warning, critical or unknown")
    parser.add_argument("--service-name", type=str, default=None)
    parser.add_argument("--message", type=str, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument("--json", action="store_true", default=False,
                        help="Print the payload as a JSON record")
    return parser


def load_config(argv: list[str] | None = None) -> PayloadConfig:
    """Build PayloadConfig from defaults <- YAML <- env vars <- CLI args (highest priority)."""
    args = build_cli_parser().parse_args(argv)

    kwargs: dict = load_yaml_config(args.config or os.environ.get("PAYLOAD_CONFIG"))

    for name, env_var in _ENV_VARS.items():
        if env_var in os.environ:
            kwargs[name] = os.environ[env_var]

    if args.hostname is not None:
        kwargs["hostname"] = args.hostname
    if args.no_local_hostname:
        kwargs["use_local_hostname"] = False
    if args.canonical:
        kwargs["canonical_hostname"] = True
    if args.level is not None:
        kwargs["level"] = args.level
    if args.service_name is not None:
        kwargs["service_name"] = args.service_name
    if args.message is not None:
        kwargs["message"] = args.message
    if args.log_level is not None:
        kwargs["log_level"] = args.log_level
    if args.json:
        kwargs["output_json"] = True

    for name in _BOOL_FIELDS:
        if name in kwargs:
            kwargs[name] = _parse_bool(kwargs[name])
    for name in kwargs:
        if name not in _BOOL_FIELDS and kwargs[name] is not None:
            kwargs[name] = str(kwargs[name])

    return PayloadConfig(**kwargs)
