"""Two-stage hub filter over a shop network.

Stage one keeps every shop at the maximum degree (the hubs). Stage two
scores each hub by the summed degree of its neighbors outside the hub set
and keeps every hub at the maximum score. Ties are always kept in full, so
the outcome does not depend on road insertion order.

A single survivor (or none) is not a meaningful reduction target and is
reported as ``0``; otherwise the survivor count is returned.
"""

from __future__ import annotations

from typing import Dict, List, Set

from ..exceptions import EmptyGraphError
from .graph import Shop, ShopNetwork
from .schemas import ReductionReport

# Fewer survivors than this means the network is already fully reduced.
MIN_SURVIVORS = 2


def _hubs(shops: List[Shop]) -> tuple[int, List[Shop]]:
    if not shops:
        raise EmptyGraphError("cannot reduce a network without shops")
    threshold = max(shop.degree for shop in shops)
    return threshold, [shop for shop in shops if shop.degree >= threshold]


def _external_impact(network: ShopNetwork, shop: Shop, hub_ids: Set[int]) -> int:
    # Degrees are taken from the full network, not from the hub subgraph.
    return sum(
        network.shops[neighbor_id].degree
        for neighbor_id in shop.neighbors
        if neighbor_id not in hub_ids
    )


def analyze(network: ShopNetwork) -> ReductionReport:
    """Run the two-stage filter and keep every intermediate value.

    The network is only read. Raises ``EmptyGraphError`` if it holds no
    shops.
    """
    shops = list(network)
    threshold, hubs = _hubs(shops)
    hub_ids = {hub.id for hub in hubs}

    impacts: Dict[int, int] = {
        hub.id: _external_impact(network, hub, hub_ids) for hub in hubs
    }
    if not impacts:
        raise EmptyGraphError("no hubs left to score")
    required_impact = max(impacts.values())
    survivor_ids = sorted(
        shop_id for shop_id, impact in impacts.items() if impact >= required_impact
    )

    result = len(survivor_ids) if len(survivor_ids) >= MIN_SURVIVORS else 0

    return ReductionReport(
        threshold=threshold,
        hub_ids=sorted(hub_ids),
        impacts=impacts,
        required_impact=required_impact,
        survivor_ids=survivor_ids,
        result=result,
    )


def reduce(network: ShopNetwork) -> int:
    """Return how many shops survive both filter stages (``0`` if fewer than two)."""
    return analyze(network).result
