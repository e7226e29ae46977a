from typing import Optional, Sequence


class FileListError(Exception):
    """
    Base class for errors that make a whole listing request fail.

    Local, recoverable conditions met during a walk (an unreadable subdirectory, a broken
    symlink) are never raised as FileListError; they are recorded on the result instead.
    """

    pass


class PatternCompilationError(FileListError):
    """
    Exception raised when exclusion patterns cannot be compiled into a matcher.

    Exclusion patterns are joined into a single regular expression alternation, so a pattern
    holding unbalanced regular expression syntax (an open bracket, a dangling quantifier)
    makes the whole set unusable.

    Attributes:
        patterns (tuple[str, ...]): The raw patterns that failed to compile, in input order.
        cause (Optional[Exception]): The error reported by the matching engine.

    Example:
        >>> error = PatternCompilationError(["node_modules", "[build"])
        >>> error.patterns
        ('node_modules', '[build')
        >>> str(error)
        "Invalid exclude patterns ['node_modules', '[build']"
    """

    def __init__(self, patterns: Sequence[str], cause: Optional[Exception] = None) -> None:
        """
        Initialize the exception with the offending pattern list.

        Args:
            patterns (Sequence[str]): The raw patterns that failed to compile.
            cause (Optional[Exception]): The underlying compilation error, if any. Its message
                is appended to the exception message.
        """
        self.patterns = tuple(patterns)
        self.cause = cause
        message = f"Invalid exclude patterns {list(self.patterns)!r}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class TraversalError(FileListError):
    """
    Exception raised when a directory cannot be traversed and the failure is fatal.

    This is raised for the root directory of a walk (missing, not a directory, or not
    readable), and for any directory when the walker's error action is RAISE.

    Attributes:
        path (str): The directory that could not be traversed.
        cause (OSError): The underlying filesystem error.

    Example:
        >>> error = TraversalError("/srv/data", FileNotFoundError(2, "No such file or directory"))
        >>> error.path
        '/srv/data'
        >>> str(error)
        'Cannot traverse /srv/data: [Errno 2] No such file or directory'
    """

    def __init__(self, path: str, cause: OSError) -> None:
        """
        Initialize the exception with the failing path and its cause.

        Args:
            path (str): The directory that could not be traversed.
            cause (OSError): The underlying filesystem error.
        """
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot traverse {path}: {cause}")

    @property
    def is_permission_error(self) -> bool:
        """Whether the failure was caused by denied access."""
        return isinstance(self.cause, PermissionError)
