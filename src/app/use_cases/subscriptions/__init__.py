"""Use cases do fluxo de inscrição."""

from .subscribe_contact import SubscribeContactUseCase

__all__ = ["SubscribeContactUseCase"]
