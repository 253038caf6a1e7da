"""Validation and normalization of microformats2 vocables.

A vocable is a microformats2 type or property name, written either in
hyphenated lower case (``h-card``, ``photo-url``) or in lower camel case
(``hCard``, ``photoUrl``).
"""

import re
from typing import NamedTuple

from micrometa.exceptions import InvalidVocableError

__all__ = ["VocableResult", "decamelize", "is_valid_vocable", "try_decamelize"]

_CAMEL_CASE = re.compile(r"[a-z]+(?:[A-Z][a-z]*)*")
_HYPHENATED = re.compile(r"[a-z]+(?:-[a-z]+)*")
_UPPERCASE = re.compile(r"[A-Z]")


def is_valid_vocable(value: object) -> bool:
    """Check whether a value is a valid microformats2 vocable.

    Args:
        value: Value to check. Anything that is not a string is invalid.

    Returns:
        True if the value is a lower camel case or a hyphenated lower case vocable.

    """
    if not isinstance(value, str):
        return False
    return bool(_CAMEL_CASE.fullmatch(value) or _HYPHENATED.fullmatch(value))


def decamelize(vocable: str, separator: str = "-") -> str:
    """Convert a camel case vocable into its separated lower case form.

    Hyphenated vocables are returned unchanged.

    Args:
        vocable: Vocable to convert, e.g. ``photoUrl``.
        separator: String inserted before every uppercase letter.

    Returns:
        The decamelized vocable, e.g. ``photo-url``.

    Raises:
        InvalidVocableError: If ``vocable`` is not a valid vocable.

    """
    if not is_valid_vocable(vocable):
        raise InvalidVocableError(vocable)
    return _UPPERCASE.sub(lambda match: separator + match.group(0), vocable).lower()


class VocableResult(NamedTuple):
    """Outcome of a non-raising decamelization."""

    value: str | None
    error: InvalidVocableError | None = None

    @property
    def ok(self) -> bool:
        """Whether the vocable was valid."""
        return self.error is None

    def unwrap(self) -> str:
        """Return the decamelized vocable or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def try_decamelize(vocable: str, separator: str = "-") -> VocableResult:
    """Decamelize a vocable, reporting invalid input as a value instead of raising."""
    try:
        return VocableResult(decamelize(vocable, separator))
    except InvalidVocableError as e:
        return VocableResult(None, e)
