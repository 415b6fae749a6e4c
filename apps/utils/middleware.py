"""
Request middleware: security headers and access logging for booking
and back-office endpoints.
"""

import logging
from apps.utils.security import add_security_headers, IPValidator

logger = logging.getLogger('apps.access')


class SecurityHeadersMiddleware:
    """Adds security headers to all responses."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        add_security_headers(response)
        return response


class RequestLoggingMiddleware:
    """
    Logs access to booking and admin endpoints.
    Logs: IP, path, method, user, response status.
    """

    SENSITIVE_PATHS = [
        '/api/bookings/',
        '/api/admin/',
        '/api/tours/admin/',
        '/api/promotions/admin/',
        '/api/auth/',
    ]

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        ip = IPValidator.get_client_ip(request)

        response = self.get_response(request)

        if any(request.path.startswith(p) for p in self.SENSITIVE_PATHS):
            # DRF authenticates inside the view, so read the user afterwards
            user_id = getattr(getattr(request, 'user', None), 'id', None)
            logger.info(
                f"API_ACCESS: path={request.path}, method={request.method}, "
                f"ip={ip}, user={user_id}, status={response.status_code}"
            )

        return response
