"""Reference data: the 48 drawn teams, playoff candidates and the official set."""
import logging
from typing import Dict, List, Optional
from sqlmodel import Session, select

from worldcup_predictor.models.prediction_set import PredictionSet
from worldcup_predictor.models.team import Team

logger = logging.getLogger(__name__)

FLAG_URL = "https://flagcdn.com/w80/{}.png"

# Draw order within each group; list index + 1 is the draw position
GROUPS: Dict[str, List[dict]] = {
    "A": [
        {"name": "Mexico", "code": "MEX", "flag": "mx"},
        {"name": "South Africa", "code": "RSA", "flag": "za"},
        {"name": "South Korea", "code": "KOR", "flag": "kr"},
        {"name": "UEFA Playoff D", "code": "PED", "flag": "eu", "playoff": True},
    ],
    "B": [
        {"name": "Canada", "code": "CAN", "flag": "ca"},
        {"name": "UEFA Playoff A", "code": "PEA", "flag": "eu", "playoff": True},
        {"name": "Qatar", "code": "QAT", "flag": "qa"},
        {"name": "Switzerland", "code": "SUI", "flag": "ch"},
    ],
    "C": [
        {"name": "Brazil", "code": "BRA", "flag": "br"},
        {"name": "Morocco", "code": "MAR", "flag": "ma"},
        {"name": "Haiti", "code": "HAI", "flag": "ht"},
        {"name": "Scotland", "code": "SCO", "flag": "gb-sct"},
    ],
    "D": [
        {"name": "United States", "code": "USA", "flag": "us"},
        {"name": "Paraguay", "code": "PAR", "flag": "py"},
        {"name": "Australia", "code": "AUS", "flag": "au"},
        {"name": "UEFA Playoff C", "code": "PEC", "flag": "eu", "playoff": True},
    ],
    "E": [
        {"name": "Germany", "code": "GER", "flag": "de"},
        {"name": "Curacao", "code": "CUW", "flag": "cw"},
        {"name": "Ivory Coast", "code": "CIV", "flag": "ci"},
        {"name": "Ecuador", "code": "ECU", "flag": "ec"},
    ],
    "F": [
        {"name": "Netherlands", "code": "NED", "flag": "nl"},
        {"name": "Japan", "code": "JPN", "flag": "jp"},
        {"name": "UEFA Playoff B", "code": "PEB", "flag": "eu", "playoff": True},
        {"name": "Tunisia", "code": "TUN", "flag": "tn"},
    ],
    "G": [
        {"name": "Belgium", "code": "BEL", "flag": "be"},
        {"name": "Egypt", "code": "EGY", "flag": "eg"},
        {"name": "Iran", "code": "IRN", "flag": "ir"},
        {"name": "New Zealand", "code": "NZL", "flag": "nz"},
    ],
    "H": [
        {"name": "Spain", "code": "ESP", "flag": "es"},
        {"name": "Cape Verde", "code": "CPV", "flag": "cv"},
        {"name": "Saudi Arabia", "code": "KSA", "flag": "sa"},
        {"name": "Uruguay", "code": "URU", "flag": "uy"},
    ],
    "I": [
        {"name": "France", "code": "FRA", "flag": "fr"},
        {"name": "Senegal", "code": "SEN", "flag": "sn"},
        {"name": "FIFA Playoff 2", "code": "PF2", "flag": "un", "playoff": True},
        {"name": "Norway", "code": "NOR", "flag": "no"},
    ],
    "J": [
        {"name": "Argentina", "code": "ARG", "flag": "ar"},
        {"name": "Algeria", "code": "ALG", "flag": "dz"},
        {"name": "Austria", "code": "AUT", "flag": "at"},
        {"name": "Jordan", "code": "JOR", "flag": "jo"},
    ],
    "K": [
        {"name": "Portugal", "code": "POR", "flag": "pt"},
        {"name": "FIFA Playoff 1", "code": "PF1", "flag": "un", "playoff": True},
        {"name": "Uzbekistan", "code": "UZB", "flag": "uz"},
        {"name": "Colombia", "code": "COL", "flag": "co"},
    ],
    "L": [
        {"name": "England", "code": "ENG", "flag": "gb-eng"},
        {"name": "Croatia", "code": "CRO", "flag": "hr"},
        {"name": "Ghana", "code": "GHA", "flag": "gh"},
        {"name": "Panama", "code": "PAN", "flag": "pa"},
    ],
}

# Teams still competing for each playoff slot (no group until they win it)
PLAYOFF_CANDIDATES: Dict[str, List[dict]] = {
    "PEA": [
        {"name": "Italy", "code": "ITA", "flag": "it"},
        {"name": "Wales", "code": "WAL", "flag": "gb-wls"},
        {"name": "Northern Ireland", "code": "NIR", "flag": "gb-nir"},
        {"name": "Bosnia and Herzegovina", "code": "BIH", "flag": "ba"},
    ],
    "PEB": [
        {"name": "Poland", "code": "POL", "flag": "pl"},
        {"name": "Sweden", "code": "SWE", "flag": "se"},
        {"name": "Ukraine", "code": "UKR", "flag": "ua"},
        {"name": "Albania", "code": "ALB", "flag": "al"},
    ],
    "PEC": [
        {"name": "Turkey", "code": "TUR", "flag": "tr"},
        {"name": "Romania", "code": "ROU", "flag": "ro"},
        {"name": "Slovakia", "code": "SVK", "flag": "sk"},
        {"name": "Kosovo", "code": "KVX", "flag": "xk"},
    ],
    "PED": [
        {"name": "Denmark", "code": "DEN", "flag": "dk"},
        {"name": "Czech Republic", "code": "CZE", "flag": "cz"},
        {"name": "North Macedonia", "code": "MKD", "flag": "mk"},
        {"name": "Republic of Ireland", "code": "IRL", "flag": "ie"},
    ],
    "PF1": [
        {"name": "Jamaica", "code": "JAM", "flag": "jm"},
        {"name": "DR Congo", "code": "COD", "flag": "cd"},
        {"name": "New Caledonia", "code": "NCL", "flag": "nc"},
    ],
    "PF2": [
        {"name": "Bolivia", "code": "BOL", "flag": "bo"},
        {"name": "Iraq", "code": "IRQ", "flag": "iq"},
        {"name": "Suriname", "code": "SUR", "flag": "sr"},
    ],
}

OFFICIAL_SET_NAME = "Official results"


def seed_teams(db: Session, force: bool = False) -> int:
    """
    Insert the drawn teams and playoff candidates.

    Returns the number of teams created; 0 when teams already exist and
    `force` is not set.
    """
    if db.exec(select(Team)).first():
        if not force:
            return 0
        for team in db.exec(select(Team)).all():
            db.delete(team)
        db.flush()

    created = 0
    for group_letter, teams in GROUPS.items():
        for position, data in enumerate(teams, start=1):
            db.add(Team(
                name=data["name"],
                code=data["code"],
                flag_url=FLAG_URL.format(data["flag"]),
                group_letter=group_letter,
                group_position=position,
                is_playoff_slot=data.get("playoff", False),
            ))
            created += 1

    for candidates in PLAYOFF_CANDIDATES.values():
        for data in candidates:
            db.add(Team(name=data["name"], code=data["code"], flag_url=FLAG_URL.format(data["flag"])))
            created += 1

    db.commit()
    logger.info("Seeded %d teams", created)
    return created


def ensure_official_set(db: Session) -> PredictionSet:
    official = db.exec(select(PredictionSet).where(PredictionSet.is_official == True)).first()  # noqa: E712
    if official:
        return official

    official = PredictionSet(name=OFFICIAL_SET_NAME, is_official=True)
    db.add(official)
    db.commit()
    db.refresh(official)
    logger.info("Created official prediction set %s", official.id)
    return official


def set_playoff_winner(db: Session, slot_code: str, winner_code: Optional[str]) -> Team:
    """
    Resolve a playoff slot to the team that won it; `None` resets the slot.

    Raises:
        ValueError: unknown slot, or the winner is not one of its candidates
    """
    slot = db.exec(select(Team).where(Team.code == slot_code, Team.is_playoff_slot == True)).first()  # noqa: E712
    if not slot:
        raise ValueError(f"Unknown playoff slot '{slot_code}'")

    if winner_code is None:
        slot.playoff_winner_id = None
    else:
        candidate_codes = {c["code"] for c in PLAYOFF_CANDIDATES.get(slot_code, [])}
        winner = db.exec(select(Team).where(Team.code == winner_code, Team.group_letter == None)).first()  # noqa: E711
        if not winner or winner_code not in candidate_codes:
            raise ValueError(f"'{winner_code}' is not a candidate for {slot_code}")
        slot.playoff_winner_id = winner.id

    db.add(slot)
    db.commit()
    db.refresh(slot)
    logger.info("Playoff slot %s resolved to %s", slot_code, winner_code)
    return slot
