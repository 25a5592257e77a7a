"""Exception classes and exit codes for colextract."""


class ExitCode:
    """Standard exit codes for the colextract application."""

    OK = 0  # Success
    USAGE = 2  # Command line usage error
    CONFIG = 3  # Configuration file error
    RUNTIME = 4  # Input could not be read
    INTERNAL = 99  # Internal/unexpected error


class CliError(Exception):
    """Base class for command line interface errors."""

    exit_code = ExitCode.RUNTIME


class UsageError(CliError):
    """Error in command line usage or invalid parameters."""

    exit_code = ExitCode.USAGE


class SpecParseError(UsageError):
    """A token in column-specifier position is not a valid specifier."""

    def __init__(self, token: str, reason: str):
        super().__init__(f"invalid column specifier '{token}': {reason}")
        self.token = token
        self.reason = reason


class DelimiterError(UsageError):
    """The delimiter is not a valid regular expression."""


class ConfigError(CliError):
    """Error in configuration file format or content."""

    exit_code = ExitCode.CONFIG


class SourceReadError(CliError):
    """An input file could not be opened or read."""

    exit_code = ExitCode.RUNTIME

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
