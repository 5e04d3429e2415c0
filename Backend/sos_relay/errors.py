"""
Error taxonomy for the SOS relay.
Every failure raised while handling a relay request is one of these;
the route boundary turns them into a {success: false, error} response.
"""


class RelayError(Exception):
    """Base class for all relay failures"""

    # All kinds currently report 400 to callers, including server-side
    # misconfiguration. Subclasses can override to split client/server errors.
    status_code = 400
    kind = 'relay'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RelayError):
    """Malformed body or bad player_ids"""
    kind = 'validation'


class ConfigError(RelayError):
    """Provider credentials missing"""
    kind = 'config'


class UpstreamError(RelayError):
    """Provider answered with a non-success status"""
    kind = 'upstream'

    def __init__(self, message: str, status: int = None, body=None):
        super().__init__(message)
        self.status = status
        self.body = body


class TransportError(RelayError):
    """Network failure, timeout, or unreadable provider response"""
    kind = 'transport'
