"""Shop network graph store.

Shops are vertices keyed by an integer identifier; roads are undirected,
unweighted links recorded on both endpoints. The store is the single owner
of every shop and neighbor lists hold plain identifiers, so there is never
a dangling reference as long as both endpoints are registered together.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from ..exceptions import NetworkSealedError, ShopNotFoundError
from .schemas import NetworkState, ShopState


@dataclass(eq=False)
class Shop:
    """A single shop and the identifiers of the shops it has roads to."""

    id: int
    neighbors: List[int] = field(default_factory=list)

    @property
    def degree(self) -> int:
        # Multi-edges count once per road.
        return len(self.neighbors)


@dataclass
class ShopNetwork:
    """Registry of shops with lazy creation on first reference.

    The network goes through two phases: roads are added while it is open,
    then ``seal()`` freezes it for analysis. Sealing only blocks growth;
    reads are allowed in both phases.
    """

    shops: Dict[int, Shop] = field(default_factory=dict)
    sealed: bool = False

    def __len__(self) -> int:
        return len(self.shops)

    def __iter__(self) -> Iterator[Shop]:
        for shop_id in sorted(self.shops):
            yield self.shops[shop_id]

    def __contains__(self, shop_id: object) -> bool:
        return shop_id in self.shops

    def has_shop(self, shop_id: int) -> bool:
        return shop_id in self.shops

    def get_or_create(self, shop_id: int) -> Shop:
        """Return the shop registered under ``shop_id``, creating it if needed."""
        shop = self.shops.get(shop_id)
        if shop is not None:
            return shop
        if self.sealed:
            raise NetworkSealedError(f"cannot register shop {shop_id}: network is sealed")
        shop = Shop(id=shop_id)
        self.shops[shop_id] = shop
        return shop

    def add_edge(self, a_id: int, b_id: int) -> Tuple[Shop, Shop]:
        """Record an undirected road between two distinct shops.

        Unknown endpoints are created and registered in the same call. Roads
        are never deduplicated: adding the same pair twice doubles both
        degrees.
        """
        if self.sealed:
            raise NetworkSealedError(f"cannot add road {a_id}-{b_id}: network is sealed")
        if a_id == b_id:
            raise ValueError(f"shop {a_id} cannot have a road to itself")
        a = self.get_or_create(a_id)
        b = self.get_or_create(b_id)
        a.neighbors.append(b.id)
        b.neighbors.append(a.id)
        return a, b

    def lookup(self, shop_id: int) -> Shop:
        try:
            return self.shops[shop_id]
        except KeyError:
            raise ShopNotFoundError(shop_id) from None

    def degree(self, shop_id: int) -> int:
        return self.lookup(shop_id).degree

    def neighbors_of(self, shop_id: int) -> List[Shop]:
        """Resolve the neighbor identifiers of a shop to shop objects, in road order."""
        return [self.shops[neighbor_id] for neighbor_id in self.lookup(shop_id).neighbors]

    def total_edge_endpoints(self) -> int:
        """Sum of all neighbor-list lengths (twice the number of roads)."""
        return sum(shop.degree for shop in self.shops.values())

    def seal(self) -> "ShopNetwork":
        """End the build phase. Further growth raises ``NetworkSealedError``."""
        self.sealed = True
        return self

    def describe_connections(self) -> List[str]:
        """One line per adjacency entry, ordered by shop id then road order."""
        return [
            f"{shop.id} is connected with {neighbor_id}"
            for shop in self
            for neighbor_id in shop.neighbors
        ]

    def to_state(self) -> NetworkState:
        return NetworkState(
            shops={
                shop.id: ShopState(id=shop.id, neighbors=list(shop.neighbors))
                for shop in self
            },
            sealed=self.sealed,
        )

    @classmethod
    def from_state(cls, state: NetworkState) -> "ShopNetwork":
        """Rebuild a network from a snapshot, checking that links are symmetric and none dangles."""
        shops: Dict[int, Shop] = {}
        for key, shop_state in state.shops.items():
            if key != shop_state.id:
                raise ValueError(f"snapshot key {key} does not match shop id {shop_state.id}")
            shops[key] = Shop(id=key, neighbors=list(shop_state.neighbors))
        for shop in shops.values():
            for neighbor_id in shop.neighbors:
                if neighbor_id not in shops:
                    raise ValueError(
                        f"shop {shop.id} links to unregistered shop {neighbor_id}"
                    )
                if neighbor_id == shop.id:
                    raise ValueError(f"shop {shop.id} cannot have a road to itself")
        # Every road is recorded on both endpoints, once per road.
        link_counts = {shop_id: Counter(shop.neighbors) for shop_id, shop in shops.items()}
        for shop_id, counts in link_counts.items():
            for neighbor_id, count in counts.items():
                reverse = link_counts[neighbor_id][shop_id]
                if reverse != count:
                    raise ValueError(
                        f"shop {shop_id} lists {count} road(s) to shop {neighbor_id} "
                        f"but shop {neighbor_id} lists {reverse} back"
                    )
        return cls(shops=shops, sealed=state.sealed)
