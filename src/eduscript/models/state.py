"""Evaluated per-frame element state."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ElementState:
    """Rendered attributes of one visual element at one instant."""

    id: str
    type: str
    opacity: float
    x: float
    y: float
    content: Optional[str] = None
    radius: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.type == "text":
            data.pop("radius")
        elif self.type == "circle":
            data.pop("content")
        return data


@dataclass
class FrameSnapshot:
    """Every element's state at one sampled instant of a scene."""

    index: int
    time: float
    elements: List[ElementState] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "time": self.time,
            "elements": [element.to_dict() for element in self.elements],
        }
