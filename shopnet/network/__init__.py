"""Shop network core: graph store and reducer."""

from .graph import Shop, ShopNetwork
from .reducer import analyze, reduce
from .schemas import NetworkState, ReductionReport, ShopState

__all__ = [
    "Shop",
    "ShopNetwork",
    "ShopState",
    "NetworkState",
    "ReductionReport",
    "analyze",
    "reduce",
]
