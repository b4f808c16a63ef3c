"""
Rate limiting configuration.

Uses slowapi to enforce rate limits. Each application gets its own
limiter built from its settings: SlowAPIMiddleware applies the default
limit to every route, and the credential check carries a tighter limit
of its own. Exceeded limits raise RateLimitExceeded, an HTTPException
with status 429, which the error pipeline renders like any other error.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from userbase.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter keyed on the client address.

    Args:
        settings: Application settings; rate_limit_default applies to
            every route without a limit of its own.

    Returns:
        A limiter with in-memory counters.
    """
    return Limiter(
        key_func=get_remote_address, default_limits=[settings.rate_limit_default]
    )
