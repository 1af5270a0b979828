"""Exception hierarchy for shop networks and road-map ingestion."""

from __future__ import annotations


class ShopnetError(Exception):
    """Base exception for all shopnet errors."""

    kind = "shopnet"


class EmptyGraphError(ShopnetError):
    """Reduction requested on a network without shops."""

    kind = "graph"


class ShopNotFoundError(ShopnetError, KeyError):
    """No shop is registered under the requested identifier."""

    kind = "lookup"

    def __init__(self, shop_id: int) -> None:
        super().__init__(shop_id)
        self.shop_id = shop_id

    def __str__(self) -> str:
        return f"no shop registered with identifier {self.shop_id}"


class NetworkSealedError(ShopnetError):
    """Network mutated after its build phase ended."""

    kind = "graph"


class RoadMapError(ShopnetError):
    """Base for failures while reading a road map."""

    kind = "parsing"


class RoadMapNotFoundError(RoadMapError, FileNotFoundError):
    """Input file is missing or unreadable."""

    kind = "io"


class RoadMapDecodeError(RoadMapError):
    """Input file is not valid UTF-8 text."""

    kind = "io"


class HeaderFormatError(RoadMapError):
    """First line does not hold the shop and road counts."""


class CountRangeError(RoadMapError):
    """Declared shop or road count is outside the accepted range."""

    kind = "argument"


class RoadFormatError(RoadMapError):
    """A road line does not start with two integers."""

    def __init__(self, line_number: int, text: str) -> None:
        super().__init__(f'unexpected char stray at line {line_number} - "{text}"')
        self.line_number = line_number
        self.text = text
