"""
Road-map loading for line-oriented shop network descriptions.

This module provides RoadMapLoader for converting a road-map text file into a
validated RoadMap, and build_network() for turning that RoadMap into a sealed
ShopNetwork ready for reduction.

File format:
```
4 3        <- shop_count road_count
1 2        <- one road per line, two shop identifiers
2 3
3 4
```

Validation policy:
- Unparsable header -> HeaderFormatError (fatal)
- Header counts outside the configured limits -> CountRangeError (fatal)
- Road line not starting with two integers -> RoadFormatError (fatal)
- Identifier outside the accepted id range -> warning, line skipped
- Road from a shop to itself -> warning, line skipped
- Fewer road lines than declared -> warning, roads read so far are kept
- Lines after the declared road count are ignored

Declared counts are only checked against their limits. Whether they match the
number of distinct shops or roads actually read is not this module's concern.

Usage:
    loader = RoadMapLoader()
    road_map = loader.load(Path("roads.txt"))
    network = build_network(road_map)
"""

import re
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .config import Config
from .exceptions import (
    CountRangeError,
    HeaderFormatError,
    RoadFormatError,
    RoadMapDecodeError,
    RoadMapNotFoundError,
)
from .logging_utils import Diagnostics
from .network import ShopNetwork

# Two leading integers; anything after them on the line is ignored.
_PAIR_PATTERN = re.compile(r"^\s*([+-]?\d+)\s+([+-]?\d+)")


class Road(BaseModel):
    """A validated road between two shop identifiers."""

    source: int
    target: int
    line_number: int = Field(..., ge=2, description="1-based line in the input file")


class SkippedRoad(BaseModel):
    """A road line that was read but not handed to the network."""

    line_number: int
    text: str
    reason: str


class RoadMap(BaseModel):
    """Validated contents of a road-map file."""

    shop_count: int = Field(..., description="Declared number of shops")
    road_count: int = Field(..., description="Declared number of roads")
    roads: List[Road] = Field(default_factory=list)
    skipped: List[SkippedRoad] = Field(default_factory=list)


def _parse_pair(text: str) -> Optional[Tuple[int, int]]:
    match = _PAIR_PATTERN.match(text)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


class RoadMapLoader:
    """Load and validate road maps from text.

    Limits default to the values in ``Config`` and may be overridden per
    loader. Warnings go through the injected ``Diagnostics``; fatal problems
    are raised as ``RoadMapError`` subclasses.
    """

    def __init__(
        self,
        *,
        min_shops: Optional[int] = None,
        max_shops: Optional[int] = None,
        min_roads: Optional[int] = None,
        max_roads: Optional[int] = None,
        min_shop_id: Optional[int] = None,
        max_shop_id: Optional[int] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.min_shops = Config.MIN_SHOPS if min_shops is None else min_shops
        self.max_shops = Config.MAX_SHOPS if max_shops is None else max_shops
        self.min_roads = Config.MIN_ROADS if min_roads is None else min_roads
        self.max_roads = Config.MAX_ROADS if max_roads is None else max_roads
        self.min_shop_id = Config.MIN_SHOP_ID if min_shop_id is None else min_shop_id
        self.max_shop_id = Config.MAX_SHOP_ID if max_shop_id is None else max_shop_id
        self.diagnostics = diagnostics or Diagnostics()

    def load(self, path: Path) -> RoadMap:
        """Read and parse a road-map file.

        Raises:
            RoadMapNotFoundError: If the file is missing or cannot be read
            RoadMapDecodeError: If the file is not valid UTF-8
            RoadMapError: For any fatal format or range problem
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RoadMapNotFoundError(f"file couldn't be opened: {path}") from exc
        except UnicodeDecodeError as exc:
            raise RoadMapDecodeError(
                f"file couldn't be read as UTF-8 text: {path} (byte {exc.start})"
            ) from exc
        return self.parse(text)

    def parse(self, text: str) -> RoadMap:
        """Parse road-map text that has already been read into memory."""
        lines = text.splitlines()
        if not lines:
            raise HeaderFormatError("couldn't parse header: input is empty")

        shop_count, road_count = self._parse_header(lines[0])
        road_map = RoadMap(shop_count=shop_count, road_count=road_count)

        road_lines = lines[1 : 1 + road_count]
        for offset, raw in enumerate(road_lines):
            line_number = offset + 2
            pair = _parse_pair(raw)
            if pair is None:
                raise RoadFormatError(line_number, raw)
            self._accept_road(road_map, line_number, raw, *pair)

        if len(road_lines) < road_count:
            self.diagnostics.warn(
                f"expected {road_count} roads but the input ends after {len(road_lines)}"
            )

        return road_map

    def _parse_header(self, line: str) -> Tuple[int, int]:
        pair = _parse_pair(line)
        if pair is None:
            raise HeaderFormatError(f'couldn\'t parse header - "{line}"')
        shop_count, road_count = pair

        if not self.min_shops <= shop_count <= self.max_shops:
            raise CountRangeError(
                f"number of shops should be in between {self.min_shops} to "
                f"{self.max_shops} inclusive (got {shop_count})"
            )
        if not self.min_roads <= road_count <= self.max_roads:
            raise CountRangeError(
                f"number of roads should be in between {self.min_roads} to "
                f"{self.max_roads} inclusive (got {road_count})"
            )
        return shop_count, road_count

    def _accept_road(
        self, road_map: RoadMap, line_number: int, raw: str, source: int, target: int
    ) -> None:
        for label, shop_id in (("shop", source), ("destination shop", target)):
            if not self.min_shop_id <= shop_id <= self.max_shop_id:
                reason = (
                    f"identifier for {label} at line {line_number} is not in range "
                    f"{self.min_shop_id} to {self.max_shop_id} inclusive: {shop_id}"
                )
                self._skip(road_map, line_number, raw, reason)
                return

        if source == target:
            self._skip(road_map, line_number, raw, f"road at line {line_number} loops back to shop {source}")
            return

        road_map.roads.append(Road(source=source, target=target, line_number=line_number))

    def _skip(self, road_map: RoadMap, line_number: int, raw: str, reason: str) -> None:
        self.diagnostics.warn(reason)
        road_map.skipped.append(SkippedRoad(line_number=line_number, text=raw, reason=reason))


def build_network(road_map: RoadMap, diagnostics: Optional[Diagnostics] = None) -> ShopNetwork:
    """Insert every road of ``road_map`` in file order and seal the network."""
    diagnostics = diagnostics or Diagnostics()
    network = ShopNetwork()
    for road in road_map.roads:
        for role, shop_id in (("source", road.source), ("destination", road.target)):
            if not network.has_shop(shop_id):
                diagnostics.trace(
                    f"line {road.line_number}: {role} shop with identifier {shop_id} is being instantiated"
                )
        network.add_edge(road.source, road.target)
    return network.seal()


def load_network(path: Path, diagnostics: Optional[Diagnostics] = None) -> ShopNetwork:
    """Convenience function to load a road-map file straight into a sealed network."""
    loader = RoadMapLoader(diagnostics=diagnostics)
    return build_network(loader.load(path), diagnostics=diagnostics)
