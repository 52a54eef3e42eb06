"""Errors raised while serving a lookup; each knows the HTTP status it maps to."""


class SpotifyLookupError(Exception):
    status_code = 500


class BadRequest(SpotifyLookupError):
    """Required query parameter missing or empty."""
    status_code = 400


class AuthError(SpotifyLookupError):
    """Client-credentials exchange failed or returned no usable token."""


class NetworkError(SpotifyLookupError):
    """Transport failure talking to the Spotify Web API."""


class DecodeError(SpotifyLookupError):
    """Upstream body is not JSON."""


class MappingError(SpotifyLookupError):
    """Upstream JSON is well-formed but not in the expected shape."""
    status_code = 502
