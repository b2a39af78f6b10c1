from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

URI_FORMAT = "{dc}.api.mailchimp.com"
VERSION = "/3.0"

# Trailing word characters; the part after the last "-" of a key.
DATACENTER_RE = re.compile(r"\w+$", re.ASCII)


def datacenter(api_key: str) -> str:
    m = DATACENTER_RE.search(api_key or "")
    return m.group(0) if m else ""


def resolve_endpoint(api_key: str) -> str:
    dc = datacenter(api_key)
    if not dc:
        logger.warning("api key has no datacenter suffix, endpoint host will be unreachable")
    return f"https://{URI_FORMAT.format(dc=dc)}{VERSION}"
