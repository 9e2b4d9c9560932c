from sqlmodel import Session

from worldcup_predictor.engine.bracket import rank_group_third_places
from worldcup_predictor.engine.third_place import ThirdPlaceResult
from worldcup_predictor.services.standings import calculate_all_groups


def get_third_place_ranking(db: Session, set_id: int) -> ThirdPlaceResult:
    """
    Rank the third-placed teams of a prediction set.
    Groups that are incomplete or tied around 3rd place count as missing.
    """
    return rank_group_third_places(calculate_all_groups(db, set_id))
