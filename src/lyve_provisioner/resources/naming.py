"""Resource name generation."""

from __future__ import annotations

import itertools
import threading
from datetime import UTC, datetime

UNIQUE_ID_PREFIX = "terraform-"

_counter = itertools.count(1)
_lock = threading.Lock()


def unique_suffix() -> str:
    """Return a timestamp + counter suffix that never repeats within a process.

    Timestamps are in UTC with 0.1ms resolution; the counter disambiguates
    names generated within the same tick.
    """
    with _lock:
        count = next(_counter)
        stamp = datetime.now(UTC).strftime("%Y%m%d%H%M%S%f")[:-2]
    return f"{stamp}{count:08x}"


def prefixed_unique_id(prefix: str) -> str:
    return f"{prefix}{unique_suffix()}"


def name_with_suffix(name: str | None, prefix: str | None) -> str:
    """Resolve the final resource name.

    An explicit *name* wins. Otherwise *prefix* plus a unique suffix is
    used, falling back to ``UNIQUE_ID_PREFIX`` when neither is set.
    """
    if name:
        return name
    if prefix:
        return prefixed_unique_id(prefix)
    return prefixed_unique_id(UNIQUE_ID_PREFIX)
