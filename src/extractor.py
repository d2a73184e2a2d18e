"""Locate the generated video URL inside a provider response.

Video models on Replicate do not agree on an output shape: some return a bare
URL, some a list of URLs, some a dict with `video`, `url` or a nested `output`.
`extract_video_url` walks any of those and returns the first URL it finds.
"""
from typing import Any, Optional

URL_PREFIXES = ("http://", "https://")

# Nesting deeper than this is treated as "no URL"
MAX_DEPTH = 10


def _as_url(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.startswith(URL_PREFIXES):
        return value
    return None


def extract_video_url(output: Any, _depth: int = 0) -> Optional[str]:
    """Return the first video URL in `output`, or None.

    Search order is depth first. Lists are scanned in order. For dicts the
    `video` field wins over `url`, and `output` is only searched when neither
    holds a URL.
    """
    if _depth > MAX_DEPTH:
        return None

    # null / absent
    if output is None:
        return None

    # scalar text
    if isinstance(output, str):
        return _as_url(output)

    # ordered sequence
    if isinstance(output, (list, tuple)):
        for item in output:
            candidate = extract_video_url(item, _depth + 1)
            if candidate:
                return candidate
        return None

    # keyed mapping
    if isinstance(output, dict):
        for key in ("video", "url"):
            candidate = _as_url(output.get(key))
            if candidate:
                return candidate
        if "output" in output:
            return extract_video_url(output["output"], _depth + 1)
        return None

    # numbers, bools, anything else
    return None
