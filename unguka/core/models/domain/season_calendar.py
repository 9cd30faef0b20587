"""Agricultural season calendar.

Season-A runs from September to January and is named after the year in
which it ends, so September to December belong to the following year.
Season-B runs from February to August of the current year.
"""

from __future__ import annotations

from datetime import date
from typing import NamedTuple, Optional

from .enums import SeasonName


class SeasonRef(NamedTuple):
    """A season identified by its name and year."""

    name: SeasonName
    year: int


def current_season(today: Optional[date] = None) -> SeasonRef:
    """Return the season a given date falls into (defaults to today)."""
    today = today or date.today()
    if today.month >= 9:
        return SeasonRef(SeasonName.SEASON_A, today.year + 1)
    if today.month == 1:
        return SeasonRef(SeasonName.SEASON_A, today.year)
    return SeasonRef(SeasonName.SEASON_B, today.year)


def next_season(season: SeasonRef) -> SeasonRef:
    if season.name == SeasonName.SEASON_A:
        return SeasonRef(SeasonName.SEASON_B, season.year)
    return SeasonRef(SeasonName.SEASON_A, season.year + 1)


def previous_season(season: SeasonRef) -> SeasonRef:
    if season.name == SeasonName.SEASON_A:
        return SeasonRef(SeasonName.SEASON_B, season.year - 1)
    return SeasonRef(SeasonName.SEASON_A, season.year)
