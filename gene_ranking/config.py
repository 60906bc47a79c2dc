"""
Engine Configuration

Settings for a ranking run, loadable from YAML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

import yaml

from .model.inheritance import ModeOfInheritance
from .scoring.gene_scorer import ScorerConfig

logger = logging.getLogger(__name__)

ENGINE_KEYS = frozenset({"mode_of_inheritance", "scorer", "top_n", "verbose"})
SCORER_KEYS = frozenset({"priority_combination", "max_workers"})


@dataclass
class EngineConfig:
    """Complete configuration for a ranking run."""

    mode_of_inheritance: ModeOfInheritance = ModeOfInheritance.UNINITIALIZED
    scorer: ScorerConfig = field(default_factory=ScorerConfig)

    # Output
    top_n: int = 20
    verbose: bool = True

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.mode_of_inheritance, str):
            self.mode_of_inheritance = ModeOfInheritance.from_string(self.mode_of_inheritance)
        if not isinstance(self.mode_of_inheritance, ModeOfInheritance):
            raise ValueError(f"Unknown mode of inheritance: {self.mode_of_inheritance!r}")
        if not isinstance(self.top_n, int) or isinstance(self.top_n, bool):
            raise ValueError(f"top_n must be an integer, got {self.top_n!r}")
        if self.top_n < 1:
            raise ValueError("top_n must be at least 1")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "mode_of_inheritance": self.mode_of_inheritance.name,
            "scorer": self.scorer.to_dict(),
            "top_n": self.top_n,
            "verbose": self.verbose,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EngineConfig":
        """Create config from dictionary."""
        _check_keys(d, ENGINE_KEYS, "config")
        scorer = d.get("scorer") or {}
        _check_keys(scorer, SCORER_KEYS, "scorer")
        return cls(
            mode_of_inheritance=d.get("mode_of_inheritance", "UNINITIALIZED"),
            scorer=ScorerConfig(**scorer),
            top_n=d.get("top_n", 20),
            verbose=d.get("verbose", True),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "EngineConfig":
        """Load config from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r") as f:
            data: Optional[Dict[str, Any]] = yaml.safe_load(f)

        config = cls.from_dict(data or {})
        logger.info(f"Loaded config from {path}")
        return config


def _check_keys(d: Any, allowed: frozenset, section: str) -> None:
    if not isinstance(d, dict):
        raise ValueError(f"{section} must be a mapping, got {type(d).__name__}")
    unknown = sorted(str(k) for k in set(d) - allowed)
    if unknown:
        raise ValueError(f"Unknown {section} option(s): {', '.join(unknown)}")
