"""Score use cases."""

from .get_score import (
    GetTargetScoreRequest,
    GetTargetScoreUseCase,
    ListRepliesRequest,
    ListRepliesResponse,
    ListRepliesUseCase,
    ReplyItem,
    ScoreItem,
)

__all__ = [
    "GetTargetScoreRequest",
    "GetTargetScoreUseCase",
    "ListRepliesRequest",
    "ListRepliesResponse",
    "ListRepliesUseCase",
    "ReplyItem",
    "ScoreItem",
]
