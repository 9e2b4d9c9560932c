from .team import Team
from .prediction_set import PredictionSet
from .group_score import GroupMatchScore
from .tiebreaker import GroupTiebreaker
from .knockout_pick import KnockoutPick

__all__ = [
    "Team",
    "PredictionSet",
    "GroupMatchScore",
    "GroupTiebreaker",
    "KnockoutPick",
]
