class CurrencyException(Exception):
    pass


class ValidationError(CurrencyException):
    """Bad input, rejected before any cache or provider access."""

    def __init__(self, message: str, kind: str = "invalid_request"):
        super().__init__(message)
        self.message = message
        self.kind = kind


class InvalidCurrencyError(ValidationError):
    pass


class ProviderError(CurrencyException):
    """Upstream failure, tagged with the provider name and failure kind."""

    def __init__(self, message: str, provider: str = "unknown", kind: str = "provider_error"):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.kind = kind

    def __str__(self) -> str:
        if self.__cause__ is not None:
            return f"{self.provider}: {self.message} ({self.__cause__})"
        return f"{self.provider}: {self.message}"


class UnsupportedCapabilityError(ProviderError):
    def __init__(self, message: str, provider: str = "unknown"):
        super().__init__(message, provider=provider, kind="unsupported_capability")


class CacheError(CurrencyException):
    pass
