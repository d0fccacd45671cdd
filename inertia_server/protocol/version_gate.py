from __future__ import annotations

import logging

from . import headers as h
from .config_store import Version
from .contracts import ResponseEnvelope
from .request import RequestSnapshot


logger = logging.getLogger(__name__)

CONFLICT_STATUS = 409


def check_asset_version(request: RequestSnapshot, version: Version) -> ResponseEnvelope | None:
    """
    Return a 409 conflict envelope when a protocol-aware GET carries a stale
    asset version, else None.

    The client answers the conflict with a full-page visit to the location
    header, so no props are resolved for this request.
    """
    if not request.is_inertia or request.method != "GET":
        return None
    client_version = request.get_header(h.INERTIA_VERSION)
    if not client_version or client_version == str(version):
        return None
    logger.info(
        "Asset version conflict: client=%s server=%s url=%s",
        client_version,
        version,
        request.url,
    )
    return ResponseEnvelope(
        status_code=CONFLICT_STATUS,
        headers={h.INERTIA_LOCATION: request.url},
        body=None,
        is_protocol_reply=True,
    )
