from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

# Rate limits are disabled under test so fixtures can log in freely
limiter = Limiter(key_func=get_remote_address, enabled=not settings.is_testing)
