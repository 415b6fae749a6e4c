"""
Security utilities for the booking platform.

- Sensitive data filtering for logs
- Client IP extraction behind proxies
- Security headers management
"""

import logging
import re
from django.conf import settings
from django.http import HttpRequest


# ==================== LOGGING SECURITY ====================

class SensitiveDataFilter(logging.Filter):
    """
    Logging filter to mask sensitive data in log messages.
    Prevents accidental exposure of credentials, tokens, PII in logs.
    """

    PATTERNS = [
        # Credentials
        (r'password["\']?\s*[:=]\s*["\']?[^"\'\s,}]+', 'password=***MASKED***'),
        (r'token["\']?\s*[:=]\s*["\']?[^"\'\s,}]+', 'token=***MASKED***'),
        (r'secret["\']?\s*[:=]\s*["\']?[^"\'\s,}]+', 'secret=***MASKED***'),
        (r'bearer\s+[a-zA-Z0-9._-]+', 'Bearer ***MASKED***'),

        # Email masking (partial)
        (r'([a-zA-Z0-9._%+-]+)@([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})', r'\1[...]@\2'),

        # Vietnamese phone numbers
        (r'\b0\d{9,10}\b', '***PHONE***'),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Apply all masking patterns to log message."""
        if record.msg:
            msg = str(record.msg)
            for pattern, replacement in self.PATTERNS:
                msg = re.sub(pattern, replacement, msg, flags=re.IGNORECASE)
            record.msg = msg
        return True


# ==================== IP ADDRESS ====================

class IPValidator:

    @staticmethod
    def get_client_ip(request: HttpRequest) -> str:
        """Extract real client IP from request, handling proxies."""
        headers = [
            'HTTP_X_REAL_IP',
            'HTTP_X_FORWARDED_FOR',
            'HTTP_CF_CONNECTING_IP',  # Cloudflare
            'REMOTE_ADDR',
        ]

        for header in headers:
            ip = request.META.get(header)
            if ip:
                # X-Forwarded-For can contain multiple IPs
                if ',' in ip:
                    ip = ip.split(',')[0].strip()
                return ip

        return '127.0.0.1'


# ==================== RESPONSE HEADERS ====================

def add_security_headers(response) -> None:
    """Add security headers to HTTP response."""
    response['X-Frame-Options'] = 'DENY'
    response['X-Content-Type-Options'] = 'nosniff'
    response['Referrer-Policy'] = 'strict-origin-when-cross-origin'

    if not settings.DEBUG:
        response['Content-Security-Policy'] = (
            "default-src 'self'; "
            "img-src 'self' data: https:; "
            "style-src 'self' 'unsafe-inline'; "
        )

    response['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'
