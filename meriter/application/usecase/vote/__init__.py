"""Vote use cases."""

from .create_vote import CreateVoteRequest, CreateVoteResponse, CreateVoteUseCase

__all__ = [
    "CreateVoteRequest",
    "CreateVoteResponse",
    "CreateVoteUseCase",
]
