# tests/conftest.py

import json

import pytest

import litcal


RAW_TYPES = [
    {"type": 0, "name": "Title", "is_reading": False, "is_viewable": False},
    {"type": 1, "name": "Epistle", "is_reading": True, "is_viewable": True},
    {"type": 2, "name": "Gospel", "is_reading": True, "is_viewable": True},
    {"type": 19, "name": "Old Testament", "is_reading": True, "is_viewable": True},
    {"type": 20, "name": "Collect", "is_reading": False, "is_viewable": True},
    {"type": 37, "name": "Commemoration", "is_reading": False, "is_viewable": True},
]

RAW_LECTIONARY = {
    "Advent-1": [
        {"type": 0, "text": "First Sunday in Advent", "color": "Violet"},
        {"type": 2, "text": "Matthew 21:1-9", "color": "Violet"},
        {"type": 20, "text": "Stir up Your power, O Lord", "color": "Violet"},
    ],
    "Christmas-1": [
        {"type": 0, "text": "The Nativity of Our Lord", "color": "White"},
        {"type": 2, "text": "Luke 2:1-20", "color": "White"},
    ],
    "Epiphany-3": [
        {"type": 0, "text": "Third Sunday after the Epiphany", "color": "Green"},
        {"type": 19, "text": "2 Kings 5:1-15", "color": "Green"},
        {"type": 2, "text": "Matthew 8:1-13", "color": "Green"},
    ],
    "Epiphany-6": [
        {"type": 0, "text": "Transfiguration of Our Lord", "color": "White"},
        {"type": 2, "text": "Matthew 17:1-9", "color": "White"},
    ],
    "Lent-1": [
        {"type": 0, "text": "Invocabit", "color": "Violet"},
        {"type": 19, "text": "Genesis 3:1-21", "color": "Violet"},
        {"type": 1, "text": "2 Corinthians 6:1-10", "color": "Violet"},
        {"type": 2, "text": "Matthew 4:1-11", "color": "Violet"},
        {"type": 20, "text": "O Lord God, You led Your ancient people", "color": "Violet"},
    ],
}

RAW_FESTIVALS = {
    "01-25": [
        {"type": 0, "text": "The Conversion of St. Paul", "color": "White"},
        {"type": 1, "text": "Galatians 1:11-24", "color": "White"},
        {"type": 2, "text": "Matthew 19:27-30", "color": "White"},
    ],
    "02-24": [
        {"type": 0, "text": "St. Matthias, Apostle", "color": "Red"},
        {"type": 20, "text": "Almighty God, You chose Your servant Matthias", "color": "Red"},
    ],
}

RAW_COMMEMORATIONS = {
    "01-10": [{"type": 0, "text": "Basil the Great of Caesarea"}],
    "02-14": [{"type": 37, "text": "Valentine, Martyr"}],
}

RAW_DAILY = {
    "Lent-1:3": [
        {"type": 1, "text": "Joel 2:12-19"},
        {"type": 2, "text": "Matthew 6:1-21"},
        {"type": 19, "text": "Psalm 51"},
    ],
    "02-15": [
        {"type": 19, "text": "Exodus 2:1-22"},
        {"type": 2, "text": "Mark 2:1-17"},
        {"type": 19, "text": "Psalm 32"},
    ],
}


@pytest.fixture
def tables():
    return litcal.make_tables(
        lectionary=RAW_LECTIONARY,
        festivals=RAW_FESTIVALS,
        daily=RAW_DAILY,
        commemorations=RAW_COMMEMORATIONS,
        types=RAW_TYPES,
    )


@pytest.fixture
def engine(tables):
    return litcal.make_engine(tables)


@pytest.fixture
def data_dir(tmp_path):
    files = {
        "lsb-1yr.json": RAW_LECTIONARY,
        "lsb-festivals.json": RAW_FESTIVALS,
        "lsb-daily.json": RAW_DAILY,
        "lsb-commemorations.json": RAW_COMMEMORATIONS,
        "types.json": RAW_TYPES,
    }
    for name, content in files.items():
        (tmp_path / name).write_text(json.dumps(content), encoding="utf-8")
    return tmp_path
