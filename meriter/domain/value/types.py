"""Domain value objects for the Meriter ledger.

Value objects are immutable and defined by their values, not identity.
Enum values match the strings stored in the database and sent on events.
"""

from enum import Enum

from pydantic import Field

from meriter.domain.value.common import ValueObject


class TargetType(str, Enum):
    """Type of entity a vote can be cast on."""

    PUBLICATION = "publication"
    VOTE = "vote"
    COMMENT = "comment"


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"


class VoteSource(str, Enum):
    """Currency a single vote record draws from.

    Quota is the daily allowance, wallet is the persistent balance.
    """

    QUOTA = "quota"
    WALLET = "wallet"


class TransactionType(str, Enum):
    """Direction of a wallet transaction."""

    CREDIT = "credit"
    DEBIT = "debit"


class TransactionSource(str, Enum):
    """Origin of the merits moved by a transaction."""

    PERSONAL = "personal"
    QUOTA = "quota"


class ReferenceType(str, Enum):
    """What a wallet transaction refers to."""

    PUBLICATION_VOTE = "publication_vote"
    VOTE_VOTE = "vote_vote"
    COMMENT_VOTE = "comment_vote"
    PUBLICATION_WITHDRAWAL = "publication_withdrawal"
    VOTE_WITHDRAWAL = "vote_withdrawal"
    COMMENT_WITHDRAWAL = "comment_withdrawal"
    MERIT_TRANSFER_GDM_TO_FV = "merit_transfer_gdm_to_fv"
    WELCOME_MERITS = "welcome_merits"

    @classmethod
    def for_vote_on(cls, target_type: TargetType) -> "ReferenceType":
        """Reference type for a wallet debit paying for a vote."""
        return {
            TargetType.PUBLICATION: cls.PUBLICATION_VOTE,
            TargetType.VOTE: cls.VOTE_VOTE,
            TargetType.COMMENT: cls.COMMENT_VOTE,
        }[target_type]

    @classmethod
    def for_withdrawal_from(cls, target_type: TargetType) -> "ReferenceType":
        """Reference type for a wallet credit produced by a withdrawal."""
        return {
            TargetType.PUBLICATION: cls.PUBLICATION_WITHDRAWAL,
            TargetType.VOTE: cls.VOTE_WITHDRAWAL,
            TargetType.COMMENT: cls.COMMENT_WITHDRAWAL,
        }[target_type]

    @classmethod
    def withdrawals(cls) -> frozenset["ReferenceType"]:
        """Reference types that move accrued vote value into a wallet."""
        return frozenset(
            {
                cls.PUBLICATION_WITHDRAWAL,
                cls.VOTE_WITHDRAWAL,
                cls.COMMENT_WITHDRAWAL,
                cls.MERIT_TRANSFER_GDM_TO_FV,
            }
        )


class CommunityTypeTag(str, Enum):
    """Community archetype.

    Marathon of Good and Future Vision are the two special communities
    with currency-exclusive voting and the cross-community transfer rule.
    """

    CUSTOM = "custom"
    TEAM = "team"
    MARATHON_OF_GOOD = "marathon-of-good"
    FUTURE_VISION = "future-vision"
    SUPPORT = "support"
    POLITICAL = "political"
    HOUSING = "housing"
    VOLUNTEER = "volunteer"
    CORPORATE = "corporate"


class CommunityRole(str, Enum):
    """Role of a member within a community."""

    SUPERADMIN = "superadmin"
    LEAD = "lead"
    PARTICIPANT = "participant"
    VIEWER = "viewer"


class PostType(str, Enum):
    """Type of publication."""

    BASIC = "basic"
    POLL = "poll"
    PROJECT = "project"


class SocialCurrency(str, Enum):
    """Which currencies a social relationship (self, teammate) may use."""

    ANY = "any"
    QUOTA_ONLY = "quota-only"
    WALLET_ONLY = "wallet-only"
    FORBIDDEN = "forbidden"


class ProjectVoting(str, Enum):
    """How a community treats votes on project publications."""

    ANY = "any"
    WALLET_ONLY = "wallet-only"
    DISABLED = "disabled"


class ReplySort(str, Enum):
    """Ordering for vote replies."""

    CREATED_AT = "created_at"
    SCORE = "score"


class CurrencyNames(ValueObject):
    """Display names of a community's currency."""

    singular: str = Field(default="merit", min_length=1)
    plural: str = Field(default="merits", min_length=1)
    genitive: str = Field(default="merits", min_length=1)
