from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Iterable, Optional

from hpi_core.config import PREFERRED_REGIONS
from hpi_core.normalize.series import SeriesIndex


class Scene(IntEnum):
    TRENDS = 1
    SNAPSHOT = 2
    DRILLDOWN = 3


@dataclass(frozen=True)
class SessionState:
    """UI-owned state, passed explicitly into the scene builders."""

    selected_region: Optional[str]
    active_scene: Scene = Scene.TRENDS


def default_region(index: SeriesIndex, preferred: Iterable[str] = PREFERRED_REGIONS) -> Optional[str]:
    """First preferred region present in the index, else the first sorted region."""
    for r in preferred:
        if r in index:
            return r
    return index.regions[0] if index.regions else None


def initial_session(index: SeriesIndex, preferred: Iterable[str] = PREFERRED_REGIONS) -> SessionState:
    return SessionState(selected_region=default_region(index, preferred), active_scene=Scene.TRENDS)


def with_region(state: SessionState, index: SeriesIndex, region: Optional[str]) -> SessionState:
    """Select `region` if the index knows it; otherwise keep the current state."""
    if region and region in index:
        return replace(state, selected_region=region)
    return state


def with_scene(state: SessionState, scene: int) -> SessionState:
    try:
        s = Scene(int(scene))
    except ValueError:
        raise ValueError(f"unknown scene {scene!r}; expected one of {[int(x) for x in Scene]}") from None
    return replace(state, active_scene=s)
