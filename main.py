"""Entry point: build one passive check payload from config and print it."""

import json
import logging
import sys

from passive_check.config import PayloadConfig, load_config
from passive_check.errors import HostResolutionError, InvalidArgument
from passive_check.payload import Payload

logger = logging.getLogger(__name__)


def build_payload(config: PayloadConfig, resolver=None) -> Payload:
    """Construct the payload described by config.

    A failed local hostname lookup is logged and leaves the hostname as UNKNOWN.
    """
    if config.hostname:
        return Payload(config.hostname, config.level, config.service_name, config.message,
                       resolver=resolver)

    payload = Payload(level=config.level, service_name=config.service_name,
                      message=config.message, use_local_hostname=False, resolver=resolver)
    if config.use_local_hostname:
        try:
            payload.resolve_local_hostname(canonical=config.canonical_hostname)
        except HostResolutionError as e:
            logger.warning("%s; hostname left as %s", e, payload.hostname)
    return payload


def main(argv: list[str] | None = None, resolver=None) -> int:
    config = load_config(argv)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    try:
        payload = build_payload(config, resolver=resolver)
    except InvalidArgument as e:
        logger.error("Invalid payload: %s", e)
        return 2

    logger.info("Built payload for %s/%s", payload.hostname, payload.service_name)
    if config.output_json:
        print(json.dumps(payload.to_dict()))
    else:
        print(repr(payload))
    return 0


if __name__ == "__main__":
    sys.exit(main())
