from typing import Any

class DrushError(Exception):

    def __init__(self, message: str, details: dict[str, Any] | None=None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ContainerNotInitializedError(DrushError):
    pass

class ServiceNotFoundError(DrushError, KeyError):

    def __str__(self) -> str:
        return self.message

class ConfigKeyMissingError(DrushError, KeyError):

    def __str__(self) -> str:
        return self.message

class ConfigurationError(DrushError):
    pass

class VersionInfoError(DrushError):
    pass
