"""Errors raised by catalog resolution."""


class CatalogServiceError(RuntimeError):
    """Reading the shared catalog service of a parent build failed.

    Raised when the service cannot be built or queried. The underlying
    exception is always chained as __cause__. A broken registry is an
    environment or programming defect, so callers must not substitute a
    fallback catalog.
    """

    def __init__(self, service_name: str, message: str) -> None:
        super().__init__(f"Shared service '{service_name}': {message}")
        self.service_name = service_name
