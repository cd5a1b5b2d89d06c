from __future__ import annotations

"""Process-level settings for the simulation server.

Game tuning lives next to each subsystem (``actions/config.py``,
``courses/config.py``, ...). This module only carries values read from the
environment by the HTTP app.
"""

import os
from typing import Optional


def _env_int(name: str) -> Optional[int]:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


# Seed for new sessions when the client does not send one. Unset means a
# fresh OS-seeded generator per session.
DEFAULT_SEED: Optional[int] = _env_int("BAOYAN_SIM_SEED")

LOG_LEVEL: str = (os.environ.get("BAOYAN_SIM_LOG_LEVEL") or "INFO").strip().upper()

# When set, POST and DELETE /api/* require a matching X-Admin-Token header.
ADMIN_TOKEN_ENV = "BAOYAN_SIM_ADMIN_TOKEN"

# Oldest sessions are evicted past this many live games.
MAX_SESSIONS: int = _env_int("BAOYAN_SIM_MAX_SESSIONS") or 256
