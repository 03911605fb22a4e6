from dataclasses import dataclass, asdict, field
from typing import Any, Dict


@dataclass
class RankedImage:
    """An image whose pixel dimensions could be determined"""
    url: str
    width: int
    height: int
    resolution: int = field(init=False)

    def __post_init__(self):
        self.resolution = self.width * self.height

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
