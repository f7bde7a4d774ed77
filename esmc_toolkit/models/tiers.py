"""Subscription tiers and the feature table each tier unlocks."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Tier(str, Enum):
    """Subscription tiers, lowest first."""

    FREE = "FREE"
    PRO = "PRO"
    MAX = "MAX"
    VIP = "VIP"


# Access order used by TierManager.validate_access
TIER_HIERARCHY: list[str] = [t.value for t in Tier]


class ColonelRank(str, Enum):
    ALPHA = "ALPHA"
    BETA = "BETA"
    GAMMA = "GAMMA"
    DELTA = "DELTA"
    EPSILON = "EPSILON"
    ZETA = "ZETA"
    ETA = "ETA"


class TierFeatures(BaseModel):
    """What a tier is allowed to use."""

    model_config = ConfigDict(frozen=True)

    intelligence: tuple[str, ...] = ()
    colonels: tuple[ColonelRank, ...] = ()
    modules: tuple[str, ...] = ()
    memory: str = "json"
    max_projects: int = 1
    max_hardware: int = 1
    red_teaming: bool = False
    time_machine: bool = False
    memory_bank: bool = False
    echelon: bool = False
    version: str = ""
    display_name: str = ""


_ALL_RANKS = tuple(ColonelRank)
_FULL_MODULES = tuple(
    f"ESMC_3.{n}" for n in (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)
)
_FULL_INTELLIGENCE = ("PIU", "DKI", "UIP", "PCA", "ATLAS", "CUP", "TBI", "PFI")

TIER_FEATURES: dict[Tier, TierFeatures] = {
    Tier.FREE: TierFeatures(
        intelligence=("PIU",),
        colonels=_ALL_RANKS[:3],
        modules=(),
        memory="json",
        max_projects=1,
        version="ESMC 3.2",
        display_name="FREE",
    ),
    Tier.PRO: TierFeatures(
        intelligence=_FULL_INTELLIGENCE[:4],
        colonels=_ALL_RANKS[:6],
        modules=("ESMC_3.2", "ESMC_3.3", "ESMC_3.4", "ESMC_3.5", "ESMC_3.7", "ESMC_3.8"),
        memory="json",
        max_projects=10,
        time_machine=True,
        memory_bank=True,
        echelon=True,
        version="ESMC 3.7",
        display_name="PRO",
    ),
    Tier.MAX: TierFeatures(
        intelligence=_FULL_INTELLIGENCE,
        colonels=_ALL_RANKS,
        modules=_FULL_MODULES,
        memory="mysql",
        max_projects=999,
        red_teaming=True,
        time_machine=True,
        memory_bank=True,
        echelon=True,
        version="ESMC 3.11",
        display_name="MAX",
    ),
    Tier.VIP: TierFeatures(
        intelligence=_FULL_INTELLIGENCE,
        colonels=_ALL_RANKS,
        modules=_FULL_MODULES,
        memory="mysql",
        max_projects=999,
        red_teaming=True,
        time_machine=True,
        memory_bank=True,
        echelon=True,
        version="ESMC 3.11",
        display_name="VIP",
    ),
}


def features_for(tier: str | Tier | None) -> TierFeatures:
    """Feature set for *tier*, falling back to FREE for unknown names."""
    try:
        return TIER_FEATURES[Tier(tier)]
    except ValueError:
        return TIER_FEATURES[Tier.FREE]
