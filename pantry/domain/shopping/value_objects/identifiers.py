"""Identifiers для Shopping bounded context."""

from pantry.domain.shared import PrefixedId


class ShoppingSessionId(PrefixedId):
    """ShoppingSession aggregate ID (``ses_...``)."""

    prefix = "ses_"
