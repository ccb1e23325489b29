"""
Flask extension instances, kept apart from app.py to avoid circular imports.

The JSON API is exempted from CSRF in routes.tactics; CSRFProtect still
guards any form endpoints added later. Limits below apply per client
address on top of RATELIMIT_DEFAULT.
"""
from flask_wtf.csrf import CSRFProtect
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

csrf = CSRFProtect()
limiter = Limiter(key_func=get_remote_address)

ANALYSIS_LIMIT = "60 per minute"
REPORT_LIMIT = "30 per minute"
