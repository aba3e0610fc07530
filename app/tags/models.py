"""
Data models for tag statistics.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class TagStat:
    """Usage count of one tag."""
    tag: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"tag": self.tag, "count": self.count}


@dataclass
class TagStatsResult:
    """Tag frequency over a snapshot of error items."""
    stats: List[TagStat] = field(default_factory=list)
    total: int = 0          # items examined, parseable or not
    unique_tags: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "stats": [stat.to_dict() for stat in self.stats],
            "total": self.total,
            "uniqueTags": self.unique_tags
        }
