"""
Population Frequency Data

Allele frequencies observed for a variant in reference populations, and the
frequency component of the variant score.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple
import math


class FrequencySource(Enum):
    """Where a frequency observation originated."""

    UNKNOWN = "unknown"
    LOCAL = "Local"

    # 1000 Genomes
    THOUSAND_GENOMES = "1000Genomes"

    # Exome Sequencing Project
    ESP_AFRICAN_AMERICAN = "ESP AA"
    ESP_EUROPEAN_AMERICAN = "ESP EA"
    ESP_ALL = "ESP All"

    # ExAC
    EXAC_AFRICAN_INC_AFRICAN_AMERICAN = "ExAC AFR"
    EXAC_AMERICAN = "ExAC AMR"
    EXAC_EAST_ASIAN = "ExAC EAS"
    EXAC_SOUTH_ASIAN = "ExAC SAS"
    EXAC_FINNISH = "ExAC FIN"
    EXAC_NON_FINNISH_EUROPEAN = "ExAC NFE"
    EXAC_OTHER = "ExAC OTH"

    @property
    def label(self) -> str:
        return self.value


ALL_ESP_SOURCES: FrozenSet[FrequencySource] = frozenset({
    FrequencySource.ESP_AFRICAN_AMERICAN,
    FrequencySource.ESP_EUROPEAN_AMERICAN,
    FrequencySource.ESP_ALL,
})

ALL_EXAC_SOURCES: FrozenSet[FrequencySource] = frozenset({
    FrequencySource.EXAC_AFRICAN_INC_AFRICAN_AMERICAN,
    FrequencySource.EXAC_AMERICAN,
    FrequencySource.EXAC_EAST_ASIAN,
    FrequencySource.EXAC_SOUTH_ASIAN,
    FrequencySource.EXAC_FINNISH,
    FrequencySource.EXAC_NON_FINNISH_EUROPEAN,
    FrequencySource.EXAC_OTHER,
})

ALL_EXTERNAL_FREQ_SOURCES: FrozenSet[FrequencySource] = (
    frozenset({FrequencySource.THOUSAND_GENOMES}) | ALL_ESP_SOURCES | ALL_EXAC_SOURCES
)

# Frequencies are percentages; anything above this is scored as common
MAX_SCORED_FREQUENCY = 2.0


@dataclass(frozen=True)
class Frequency:
    """Allele frequency (percent) in a single population."""

    source: FrequencySource
    frequency: float

    def __post_init__(self):
        if not 0 <= self.frequency <= 100:
            raise ValueError("frequency must be a percentage between 0 and 100")


@dataclass(frozen=True)
class FrequencyData:
    """
    All known population frequencies for a variant.

    Attributes:
        rs_id: dbSNP identifier, if any
        frequencies: Per-population frequencies (percent)
    """

    rs_id: Optional[str] = None
    frequencies: Tuple[Frequency, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "frequencies", tuple(self.frequencies))

    @property
    def has_known_frequency(self) -> bool:
        return bool(self.frequencies)

    @property
    def max_freq(self) -> float:
        if not self.frequencies:
            return 0.0
        return max(f.frequency for f in self.frequencies)

    def get_frequency(self, source: FrequencySource) -> Optional[Frequency]:
        for frequency in self.frequencies:
            if frequency.source == source:
                return frequency
        return None

    @property
    def score(self) -> float:
        """
        Rarity score in [0, 1].

        Unseen variants score 1.0 and anything observed at more than 2% scores
        0.0. In between the score decays exponentially with the maximum
        observed frequency.
        """
        max_freq = self.max_freq
        if max_freq <= 0:
            return 1.0
        if max_freq > MAX_SCORED_FREQUENCY:
            return 0.0
        return min(1.0, max(0.0, 1.13533 - 0.13533 * math.exp(max_freq)))
