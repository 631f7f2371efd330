"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class StorageError(AdapterError):
    """File storage failed (disk full, permissions, missing file)."""

    pass


class UploadTooLargeError(StorageError):
    """Upload exceeded the configured size limit while streaming."""

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(f"Upload exceeds {max_bytes} bytes")


class EmailDeliveryError(AdapterError):
    """Outgoing email could not be handed to the mail server."""

    pass
