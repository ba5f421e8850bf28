"""Shared payload fixtures: minimal and fully populated build order dicts."""

import json

import pytest

MANDATORY_BUILD = {
    "authorUid": "vOiAUO06vkMXuPuYb92APdyLDUO2",
    "score": 12.5,
    "scoreAllTime": 340.0,
    "sortTitle": "fast castle into knights",
    "steps": [],
    "timeCreated": {"_seconds": 1700000000, "_nanoseconds": 250000000},
    "timeUpdated": {"_seconds": 1700003600, "_nanoseconds": 0},
    "views": 1532,
}


def _full_build(build_id: str = "00I7J47dv26cPbKmXYkO") -> dict:
    return {
        **MANDATORY_BUILD,
        "id": build_id,
        "title": "Fast Castle into Knights",
        "description": "Standard French opener",
        "video": "https://www.youtube.com/watch?v=abc123",
        "author": "Beasty",
        "civ": "FRE",
        "map": "Dry Arabia",
        "season": "S7",
        "strategy": "Fast Castle",
        "comments": 4,
        "likes": 87,
        "upvotes": 90,
        "isDraft": False,
        "steps": [
            {
                "gameplan": "Boom to castle",
                "age": 1,
                "type": "age",
                "steps": [
                    {
                        "villagers": "6",
                        "builders": "1",
                        "food": "5",
                        "wood": "0",
                        "stone": "0",
                        "gold": "0",
                        "time": "0:00",
                        "description": "Build a house @imgs/house.png@",
                    },
                    {
                        "villagers": "10",
                        "food": "8",
                        "wood": "2",
                        "time": "2:30",
                        "description": "Send scout to sheep",
                    },
                ],
            }
        ],
    }


@pytest.fixture
def minimal_build() -> dict:
    return json.loads(json.dumps(MANDATORY_BUILD))


@pytest.fixture
def full_build() -> dict:
    return _full_build()


@pytest.fixture
def build_list() -> list[dict]:
    """Ten valid builds with distinct ids, in a known order."""
    return [_full_build(f"build-{i:02d}") for i in range(10)]
