"""Error raised when module metadata cannot be obtained or parsed."""


class MetadataError(RuntimeError):
    """The metadata query for a single module failed."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
