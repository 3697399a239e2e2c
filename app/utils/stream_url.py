# app/utils/stream_url.py

import logging
from typing import Tuple

logger = logging.getLogger(__name__)


def split_stream_url(secure_stream_url: str) -> Tuple[str, str]:
    """
    Splits a Facebook RTMPS URL into (stream_url, stream_key).

    The key is the last path segment; the base keeps its trailing slash, so
    stream_url + stream_key == secure_stream_url. Cut at the last "/" only,
    the key may legitimately appear earlier in the URL.

    Raises ValueError when there is no "/" or the final segment is empty.
    """
    base, separator, key = (secure_stream_url or "").rpartition("/")
    if not separator or not key:
        logger.debug("Stream URL has no trailing key segment")
        raise ValueError("Stream URL has no stream key segment")
    return base + separator, key
