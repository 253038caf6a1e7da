"""micrometa custom exceptions."""

class MicrometaError(Exception):
    """Base exception for all micrometa errors."""


class ParserError(MicrometaError):
    """Errors while parsing microformats2 content."""


class ParserSetupError(ParserError):
    """The structural microformats2 parser could not be constructed."""


class InvalidVocableError(ParserError):
    """A string is not a valid microformats2 vocable."""

    def __init__(self, vocable: object) -> None:
        """Initialize the error with the offending value.

        Args:
            vocable: The value that failed vocable validation.

        """
        super().__init__(f"Invalid microformats2 vocable: {vocable!r}")
        self.vocable = vocable


class FetchError(MicrometaError):
    """Errors while fetching a document over HTTP."""
