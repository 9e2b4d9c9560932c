import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine, select
from sqlmodel.pool import StaticPool

from main import app
from worldcup_predictor.database import get_session
from worldcup_predictor.engine.group_matches import ALL_GROUPS
from worldcup_predictor.models import GroupMatchScore, PredictionSet, Team
from worldcup_predictor.seed import seed_teams

# Create in-memory database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Groups whose third-placed team finishes among the best eight in `fill_groups`
QUALIFYING_GROUPS = "ABDEGIKL"

# Draw position 1 beats everyone, 2 beats 3 and 4, 3 beats 4
DECISIVE_SCORES = {1: (1, 0), 2: (1, 0), 3: (1, 0), 4: (1, 0), 5: (1, 0), 6: (1, 0)}


def decisive_scores(strong_third: bool = False) -> dict:
    """Scores giving draw order 1-2-3-4; a strong third wins its match 3-0."""
    scores = dict(DECISIVE_SCORES)
    if strong_third:
        scores[2] = (3, 0)
    return scores


@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="teams")
def teams_fixture(session: Session):
    """All seeded teams keyed by code."""
    seed_teams(session)
    return {team.code: team for team in session.exec(select(Team)).all()}


@pytest.fixture(name="group_teams")
def group_teams_fixture():
    """Four unsaved teams in draw order, enough for the pure engine."""
    return [
        Team(id=1, name="Alpha", code="ALP", group_letter="A", group_position=1),
        Team(id=2, name="Bravo", code="BRV", group_letter="A", group_position=2),
        Team(id=3, name="Charlie", code="CHA", group_letter="A", group_position=3),
        Team(id=4, name="Delta", code="DEL", group_letter="A", group_position=4),
    ]


@pytest.fixture(name="prediction_set")
def prediction_set_fixture(session: Session, teams):
    prediction_set = PredictionSet(name="Test picks")
    session.add(prediction_set)
    session.commit()
    session.refresh(prediction_set)
    return prediction_set


@pytest.fixture(name="fill_groups")
def fill_groups_fixture(session: Session):
    """Write scores for every group directly, bypassing the API."""
    def fill(set_id: int, qualifying: str = QUALIFYING_GROUPS):
        for group in ALL_GROUPS:
            for number, (score_a, score_b) in decisive_scores(group in qualifying).items():
                session.add(GroupMatchScore(
                    prediction_set_id=set_id,
                    group_letter=group,
                    match_number=number,
                    score_a=score_a,
                    score_b=score_b
                ))
        session.commit()
    return fill


def team_id(teams: dict, group_letter: str, position: int) -> int:
    return next(
        t.id for t in teams.values()
        if t.group_letter == group_letter and t.group_position == position
    )
