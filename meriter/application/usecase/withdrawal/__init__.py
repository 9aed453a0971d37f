"""Withdrawal use cases."""

from .withdraw import WithdrawRequest, WithdrawResponse, WithdrawUseCase

__all__ = [
    "WithdrawRequest",
    "WithdrawResponse",
    "WithdrawUseCase",
]
