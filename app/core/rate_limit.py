"""
Rate limiting configuration for the Recipe Instructions API.

Uses slowapi to throttle the write endpoints per client.
Configured to work behind a proxy using the X-Forwarded-For header.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from fastapi import Request
from app.constants import RATE_LIMIT_ENABLED, RATE_LIMIT_WRITES


def get_real_ip(request: Request) -> str:
    """
    Extract the real client IP from request headers.

    Priority:
    1. X-Forwarded-For (first IP in chain) - for proxy deployments
    2. X-Real-IP - alternative proxy header
    3. request.client.host - direct connection fallback
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # "client, proxy1, proxy2": the leftmost entry is the original client
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


limiter = Limiter(key_func=get_real_ip, enabled=RATE_LIMIT_ENABLED)

# Applied to every endpoint that writes instructions
WRITE_LIMIT = RATE_LIMIT_WRITES
