import re

from .errors import InvalidNumericField, MalformedURL, MissingMandatoryField, QueryError
from .urls import resolve_url
from .util import _getLogger

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def _parse_integer(value):
    if value is None or not _INTEGER_RE.match(value):
        raise ValueError("invalid literal for an integer: %r" % value)
    return int(value)


class FieldExtractor(object):
    """
    Reads fields out of a scoped query context with mandatory or optional
    semantics. Mandatory lookups raise, optional lookups return `None` for
    anything absent, empty or unusable.
    """

    def __init__(self, context):
        self.context = context
        self._log = _getLogger("FieldExtractor")

    def mandatory(self, path):
        try:
            value = self.context.get_string(path)
        except QueryError as exc:
            raise MissingMandatoryField(path) from exc
        if not value:
            raise MissingMandatoryField(path)
        return value

    def optional(self, path):
        try:
            value = self.context.get_string(path)
        except QueryError:
            return None
        return value or None

    def optional_url(self, path, base_url):
        value = self.optional(path)
        try:
            return resolve_url(value, base_url)
        except MalformedURL as exc:
            self._log.warning("Ignoring malformed %s %r: %s", path, value, exc)
            return None

    def optional_long(self, path):
        value = self.optional(path)
        if value is None:
            return None
        try:
            return _parse_integer(value)
        except ValueError:
            # Non-numeric data here is common on non-compliant devices.
            self._log.warning("Ignoring non-numeric %s %r", path, value)
            return None

    def mandatory_int(self, path):
        value = self.mandatory(path)
        try:
            return _parse_integer(value)
        except ValueError as exc:
            raise InvalidNumericField(path, value) from exc
