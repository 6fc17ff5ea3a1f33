"""
Shared fixtures: an in-memory SQLite database, a seeded catalog, and a client
whose requests all run against that database.
"""
import os

# Settings require DATABASE_URL at import time
os.environ["DATABASE_URL"] = "sqlite://"

from typing import Any, Generator, Optional, List  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel, Session, create_engine  # noqa: E402

from hanzi.core.database import get_session  # noqa: E402
from hanzi.main import app  # noqa: E402
from hanzi.models.models import User, ChineseCharacter  # noqa: E402

# (index, simplified, traditional, pinyin, radical, radical_pinyin, definition, hsk_level)
SAMPLE_CHARACTERS = [
    (0, "的", "的", "de", "白", "bái", ["of", "possessive particle"], 1),
    (1, "一", "一", "yī", "一", "yī", ["one", "single"], 1),
    (2, "是", "是", "shì", "日", "rì", ["to be", "yes"], 2),
    (3, "不", "不", "bù", "一", "yī", ["no", "not"], 3),
    (4, "了", "了", "le", "亅", "jué", ["completed action marker"], 1),
    (5, "人", "人", "rén", "人", "rén", ["person", "people"], 2),
    (6, "我", "我", "wǒ", "戈", "gē", ["I", "me"], 4),
    (7, "在", "在", "zài", "土", "tǔ", ["at", "in", "to exist"], 2),
    (8, "有", "有", "yǒu", "月", "yuè", ["to have", "there is"], 5),
    (9, "学", "學", "xué", "子", "zǐ", ["to study", "to learn"], 6),
]


def make_character(
    index: int,
    simplified: str,
    traditional: str,
    pinyin: str,
    radical: str,
    radical_pinyin: Optional[str],
    definition: List[str],
    hsk_level: int,
    traditional_variants: Optional[List[str]] = None,
) -> ChineseCharacter:
    return ChineseCharacter(
        index=index,
        simplified=simplified,
        traditional=traditional,
        traditional_variants=traditional_variants or [],
        pinyin=pinyin,
        radical=radical,
        radical_pinyin=radical_pinyin,
        definition=definition,
        examples=[{"chinese": simplified, "english": definition[0]}],
        hsk_level=hsk_level,
    )


@pytest.fixture(name="session")
def session_fixture() -> Generator[Session, None, None]:
    """Transient in-memory SQLite database shared by the test and the app."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="client")
def client_fixture(session: Session) -> Generator[TestClient, None, None]:
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="catalog")
def catalog_fixture(session: Session) -> List[ChineseCharacter]:
    """Catalog seeded with indices 0-9."""
    characters = [make_character(*row) for row in SAMPLE_CHARACTERS]
    session.add_all(characters)
    session.commit()
    return characters


def create_user(session: Session, username: str) -> int:
    user = User(username=username, email=f"{username}@example.com")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user.id


@pytest.fixture(name="user_id")
def user_id_fixture(session: Session) -> int:
    return create_user(session, "learner")


@pytest.fixture(name="other_user_id")
def other_user_id_fixture(session: Session) -> int:
    return create_user(session, "classmate")


def set_progress(client: TestClient, user_id: int, index: int, **flags: Any) -> dict:
    """Upsert a full progress triple through the API."""
    body = {"character_index": index, "reading": False, "writing": False, "radical": False}
    body.update(flags)
    response = client.post("/api/v1/progress", params={"user_id": user_id}, json=body)
    assert response.status_code == 200, response.text
    return response.json()
