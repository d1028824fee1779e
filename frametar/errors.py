class TarballError(Exception):
    """Base class for frametar errors."""


# Header encoding
class NonAsciiName(TarballError, ValueError):
    """A name or header string contains a character above U+00FF."""


class NameTooLong(TarballError, ValueError):
    """The encoded name does not fit the 100-byte name field."""


class FieldOverflow(TarballError, ValueError):
    """A number or string is too large for its header field."""


# Archive state
class EmptyArchive(TarballError):
    """The archive has no entries to write."""
