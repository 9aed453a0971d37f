"""Wallet use cases."""

from .get_wallet_balance import (
    GetWalletBalanceRequest,
    GetWalletBalanceResponse,
    GetWalletBalanceUseCase,
)
from .grant_welcome_merits import (
    GrantWelcomeMeritsRequest,
    GrantWelcomeMeritsResponse,
    GrantWelcomeMeritsUseCase,
)
from .list_transactions import (
    ListTransactionsRequest,
    ListTransactionsResponse,
    ListTransactionsUseCase,
    TransactionItem,
)
from .verify_wallet_balance import (
    VerifyWalletBalanceRequest,
    VerifyWalletBalanceResponse,
    VerifyWalletBalanceUseCase,
)

__all__ = [
    "GetWalletBalanceRequest",
    "GetWalletBalanceResponse",
    "GetWalletBalanceUseCase",
    "GrantWelcomeMeritsRequest",
    "GrantWelcomeMeritsResponse",
    "GrantWelcomeMeritsUseCase",
    "ListTransactionsRequest",
    "ListTransactionsResponse",
    "ListTransactionsUseCase",
    "TransactionItem",
    "VerifyWalletBalanceRequest",
    "VerifyWalletBalanceResponse",
    "VerifyWalletBalanceUseCase",
]
