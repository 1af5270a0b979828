"""
Shopnet - shop/road network reduction.

Build an undirected network of shops from a road list and reduce it to the
hubs that are both most connected and reach furthest outside the hub set.

The network core is silent and side-effect free: it never reads files,
never prints, and reports failures as exceptions. Reading road maps and
emitting diagnostics belong to the loader and CLI layers.
"""

__version__ = "0.1.0"

# Core network components
from .network import (
    Shop,
    ShopNetwork,
    ShopState,
    NetworkState,
    ReductionReport,
    analyze,
    reduce,
)

# Errors
from .exceptions import (
    ShopnetError,
    EmptyGraphError,
    ShopNotFoundError,
    NetworkSealedError,
    RoadMapError,
    RoadMapNotFoundError,
    RoadMapDecodeError,
    HeaderFormatError,
    CountRangeError,
    RoadFormatError,
)

# Road-map ingestion
from .loader import Road, RoadMap, RoadMapLoader, SkippedRoad, build_network, load_network

__all__ = [
    # Network core
    "Shop",
    "ShopNetwork",
    "ShopState",
    "NetworkState",
    "ReductionReport",
    "analyze",
    "reduce",
    # Errors
    "ShopnetError",
    "EmptyGraphError",
    "ShopNotFoundError",
    "NetworkSealedError",
    "RoadMapError",
    "RoadMapNotFoundError",
    "RoadMapDecodeError",
    "HeaderFormatError",
    "CountRangeError",
    "RoadFormatError",
    # Ingestion
    "Road",
    "RoadMap",
    "RoadMapLoader",
    "SkippedRoad",
    "build_network",
    "load_network",
]
