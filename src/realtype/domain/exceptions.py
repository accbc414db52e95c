"""
Domain exceptions for realtype.

Classification itself never fails; these cover invalid input handed to the
command line and the value loaders.
"""


class ConfigurationError(Exception):
    """Raised when command-line input or a values file is invalid or missing."""

    def __init__(self, message: str, hint: str = ""):
        """
        Args:
            message: Human-readable error message
            hint: Optional suggestion shown under the error
        """
        super().__init__(message)
        self.hint = hint
