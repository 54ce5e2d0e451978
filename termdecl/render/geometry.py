"""
Screen regions and the equal-share partition used by containers.

A region is a rectangle of terminal cells. Containers divide their region
along one axis into one slice per child; the slices are contiguous, never
overlap and always sum to the parent's extent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class Direction(Enum):
    """Axis along which a container splits its region."""

    HORIZONTAL = "horizontal"  # Split width, children side by side
    VERTICAL = "vertical"  # Split height, children stacked

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


@dataclass(frozen=True)
class Region:
    """A rectangle of cells: origin (x, y) and extent (width, height)."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Region extent must be non-negative")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, other: "Region") -> bool:
        """Whether ``other`` lies entirely within this region."""
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def overlaps(self, other: "Region") -> bool:
        """Whether the two regions share at least one cell."""
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


def equal_shares(total: int, count: int) -> List[int]:
    """Divide ``total`` cells into ``count`` equal shares.

    The remainder of the integer division goes to the last share, so the
    shares always sum to ``total``.

    Examples:
        >>> equal_shares(10, 3)
        [3, 3, 4]
        >>> equal_shares(2, 4)
        [0, 0, 0, 2]
    """
    if count <= 0:
        return []
    base, remainder = divmod(total, count)
    shares = [base] * count
    shares[-1] += remainder
    return shares


def split_region(region: Region, direction: Direction, count: int) -> List[Region]:
    """Partition ``region`` into ``count`` slices along ``direction``.

    Horizontal splits divide the width, vertical splits divide the height;
    the other dimension is inherited unchanged.
    """
    regions: List[Region] = []
    if direction is Direction.HORIZONTAL:
        offset = region.x
        for share in equal_shares(region.width, count):
            regions.append(Region(offset, region.y, share, region.height))
            offset += share
    else:
        offset = region.y
        for share in equal_shares(region.height, count):
            regions.append(Region(region.x, offset, region.width, share))
            offset += share
    return regions
