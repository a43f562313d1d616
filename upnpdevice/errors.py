class UPNPError(Exception):
    """
    Exception class for UPnP errors.
    """

    pass


class StructuralViolation(UPNPError):
    """
    The description document is missing something the schema requires.
    """

    pass


class MissingMandatoryField(StructuralViolation):
    """
    A mandatory element is absent or empty.
    """

    def __init__(self, field):
        super(MissingMandatoryField, self).__init__(
            "Mandatory field %r not provided, uncompliant UPnP device" % field
        )
        self.field = field


class InvalidNumericField(StructuralViolation):
    """
    A mandatory numeric element doesn't contain an integer.
    """

    def __init__(self, field, value):
        super(InvalidNumericField, self).__init__(
            "Field %r must be an integer, got %r" % (field, value)
        )
        self.field = field
        self.value = value


class DeviceTreeTooDeep(StructuralViolation):
    """
    Embedded devices are nested deeper than the builder allows.
    """

    pass


class VersionIncompatible(UPNPError):
    """
    The document declares a UPnP version we can't parse.
    """

    def __init__(self, major, minor):
        super(VersionIncompatible, self).__init__(
            "Unsupported device version (%s.%s)" % (major, minor)
        )
        self.major = major
        self.minor = minor


class MalformedURL(UPNPError, ValueError):
    """
    A URL couldn't be parsed, or a relative URL had no base to resolve against.
    """

    pass


class InfrastructureFailure(UPNPError):
    """
    The description couldn't be retrieved or isn't a usable XML document.
    """

    pass


class DescriptionFetchError(InfrastructureFailure):
    pass


class InvalidDocument(InfrastructureFailure):
    pass


class QueryError(UPNPError):
    pass


class PathNotFound(QueryError):
    """
    A query path didn't resolve to any node.
    """

    def __init__(self, path):
        super(PathNotFound, self).__init__("Path %r not found" % path)
        self.path = path
