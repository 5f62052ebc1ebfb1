"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DEFAULT_UNEXPECTED_MESSAGE,
    DEFAULT_UPSTREAM_MESSAGE,
    ClientInputError,
    ConfigurationError,
    InfrastructureError,
    InvalidEmailError,
    MethodNotAllowedError,
    SubscriptionError,
    TransportError,
    UpstreamContractViolation,
    UpstreamError,
)

__all__ = [
    "DEFAULT_UNEXPECTED_MESSAGE",
    "DEFAULT_UPSTREAM_MESSAGE",
    "ClientInputError",
    "ConfigurationError",
    "InfrastructureError",
    "InvalidEmailError",
    "MethodNotAllowedError",
    "SubscriptionError",
    "TransportError",
    "UpstreamContractViolation",
    "UpstreamError",
]
