# common.py
# Small helpers shared by the model modules.

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Timezone-aware "now" for created_at/changed_at columns."""
    return datetime.now(timezone.utc)


def strip_text(value):
    """Field validator body: trims strings so "   " fails min_length checks."""
    if isinstance(value, str):
        return value.strip()
    return value
