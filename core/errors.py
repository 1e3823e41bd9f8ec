"""
Error types for the CSS bundler.
"""


class BundleError(Exception):
    """Fatal bundling failure with the offending path and underlying cause."""
    def __init__(self, message, path=None, cause=None, suggestion=None):
        self.message = message
        self.path = path
        self.cause = cause
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with path, cause and suggestion."""
        parts = [self.message]
        if self.path:
            parts.append(f": {self.path}")
        if self.cause is not None:
            parts.append(f" ({describe_os_error(self.cause)})")
        if self.suggestion:
            parts.append(f"\n   💡 {self.suggestion}")
        return "".join(parts)


def describe_os_error(err):
    """Human-readable message for a read/write failure."""
    if isinstance(err, OSError) and err.strerror:
        return err.strerror
    return str(err)
