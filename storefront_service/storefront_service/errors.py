"""Error kinds raised by the storefront components.

Each error carries the HTTP status and the client-facing message it maps to,
so the HTTP layer is the only place that turns them into responses. The
exception text itself holds the detailed cause and only goes to the logs.
"""


class StorefrontError(Exception):
    """Base class for errors surfaced through the HTTP API."""

    status_code: int = 500
    public_message: str = "Erro interno"


class ValidationError(StorefrontError):
    """A required input field is missing or empty."""

    status_code = 400
    public_message = "Dados incompletos. Informe cliente e produtos."


class UpstreamError(StorefrontError):
    """A product provider could not be fetched or returned an unusable payload."""

    status_code = 500
    public_message = "Erro ao buscar produtos"

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message)
        self.provider = provider


class StorageError(StorefrontError):
    """The purchase store failed to create its schema or write a row."""

    status_code = 500
    public_message = "Erro ao registrar compra"
