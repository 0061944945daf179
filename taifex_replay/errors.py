"""Exception hierarchy shared by the package."""


class CoreUtilsError(RuntimeError):
    """Base class for every error raised by this package."""


class InvalidArgumentError(CoreUtilsError):
    """An argument passed to a function is not acceptable."""


class ParsingError(CoreUtilsError):
    """Data could not be decoded or parsed."""


class ConfigurationError(CoreUtilsError):
    """A configuration value is missing or inconsistent."""


class LogIOError(CoreUtilsError):
    """Reading or writing a file or stream failed."""