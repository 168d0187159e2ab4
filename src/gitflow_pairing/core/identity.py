"""Parsing of ``Name <email>`` identity lines.

The same parser handles the author identity reported by ``git var
GIT_AUTHOR_IDENT`` (``Name <email> 1700000000 +0100``) and trailer lines
such as ``Co-authored-by: Name <email>``.
"""

from ..errors import MalformedIdentityError


def parse_identity(identity: str) -> tuple[str, str]:
    """Split an identity line into its name and email.

    A label ending in ``:`` before the ``<`` is skipped together with the
    single space that follows it. The name ends one character before ``<``.

    Args:
        identity: Identity text, optionally prefixed by a ``Label:`` part

    Returns:
        Tuple of (name, email)

    Raises:
        MalformedIdentityError: If there is no ``<`` or no ``>`` after it

    Example::

        >>> parse_identity("Co-authored-by: Alice A <a@x.com>")
        ('Alice A', 'a@x.com')
    """
    open_idx = identity.find("<")
    if open_idx == -1:
        raise MalformedIdentityError(identity)

    close_idx = identity.find(">", open_idx + 1)
    if close_idx == -1:
        raise MalformedIdentityError(identity)

    colon_idx = identity.find(":")
    name_start = 0
    if colon_idx != -1 and colon_idx < open_idx:
        name_start = colon_idx + 2

    name_end = max(open_idx - 1, name_start)
    return identity[name_start:name_end], identity[open_idx + 1 : close_idx]


def format_identity(name: str, email: str) -> str:
    """Render a name and email the way commit trailers expect them."""
    return f"{name} <{email}>"
