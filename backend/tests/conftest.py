"""Shared test fixtures."""

from __future__ import annotations

import pytest

from trophicnet.engine.levels import ColorPair, Level


# Birds eating insects eating aphids
FOOD_CHAIN = [
    Level(
        populations=(0.6, 0.4),
        colors=(ColorPair("#1b9e77", "white"), ColorPair("#d95f02", "black")),
        labels=("Tit", "Sparrow"),
    ),
    Level(
        populations=(0.5, 0.3, 0.2),
        occupation_per_previous_level=(
            (0.5, 0.5),
            (1.0, 0.0),
            (0.25, 0.75),
        ),
        colors=(ColorPair("#7570b3", "white"),),
    ),
    Level(
        populations=(1.0,),
        occupation_per_previous_level=((0.2, 0.3, 0.5),),
    ),
]

# Two levels, the lower one entirely occupied by the first upper species
SINGLE_PREY = [
    Level(populations=(0.6, 0.4)),
    Level(populations=(1.0,), occupation_per_previous_level=((1.0, 0.0),)),
]

# JSON shape of FOOD_CHAIN as posted to the API
FOOD_CHAIN_PAYLOAD = {
    "levels": [
        {
            "populations": [0.6, 0.4],
            "colors": [
                {"fill": "#1b9e77", "text": "white"},
                {"fill": "#d95f02", "text": "black"},
            ],
            "labels": ["Tit", "Sparrow"],
        },
        {
            "populations": [0.5, 0.3, 0.2],
            "occupationPerPreviousLevel": [[0.5, 0.5], [1.0, 0.0], [0.25, 0.75]],
            "colors": [{"fill": "#7570b3", "text": "white"}],
        },
        {
            "populations": [1.0],
            "occupationPerPreviousLevel": [[0.2, 0.3, 0.5]],
        },
    ],
    "options": {"canvasWidth": 600},
}


@pytest.fixture
def food_chain() -> list[Level]:
    return list(FOOD_CHAIN)


@pytest.fixture
def single_prey() -> list[Level]:
    return list(SINGLE_PREY)


@pytest.fixture
def food_chain_payload() -> dict:
    return FOOD_CHAIN_PAYLOAD
