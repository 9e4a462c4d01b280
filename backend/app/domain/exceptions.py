"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class UnsupportedFileTypeError(Exception):
    """Raised when an upload batch contains files outside the extension allow-list."""

    def __init__(self, filenames: list[str]):
        self.filenames = filenames
        super().__init__(f"Unsupported file type: {', '.join(filenames)}")


class FileTooLargeError(Exception):
    """Raised when an uploaded file exceeds the configured size limit."""

    def __init__(self, filename: str, size: int, limit: int):
        self.filename = filename
        self.size = size
        self.limit = limit
        super().__init__(
            f"File '{filename}' is {size} bytes, exceeding the {limit} byte limit"
        )
