"""
Analysis Loader

Builds Gene objects, with their variant evaluations and priority results,
from a YAML description of an analysis that has already been filtered and
prioritized.

Expected layout:

    genes:
      - symbol: FGFR2
        gene_id: 2263
        variants:
          - chrom: 10
            pos: 123256215
            ref: T
            alt: G
            effect: missense_variant
            score: 0.9
            filters:
              FREQUENCY_FILTER: PASS
              PATHOGENICITY_FILTER: PASS
        priority_results:
          - type: HIPHIVE_PRIORITY
            score: 0.87
"""

from pathlib import Path
from typing import Any, Dict, List, Union
import logging

import yaml

from ..model.filters import FilterResult, FilterStatus, FilterType
from ..model.frequency import Frequency, FrequencyData, FrequencySource
from ..model.gene import Gene
from ..model.priority import PriorityResult, PriorityType
from ..model.variant import VariantEffect, VariantEvaluation

logger = logging.getLogger(__name__)


def load_genes(path: Union[str, Path]) -> List[Gene]:
    """
    Load genes from a YAML analysis file.

    Args:
        path: Path to the YAML file

    Returns:
        Genes in file order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Analysis file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    genes = genes_from_dict(data)
    logger.info(f"Loaded {len(genes)} genes from {path}")
    return genes


def genes_from_dict(data: Dict[str, Any]) -> List[Gene]:
    """Build genes from a parsed analysis document."""
    if not isinstance(data, dict):
        raise ValueError(
            f"Analysis must be a mapping with a genes list, got {type(data).__name__}"
        )
    entries = data.get("genes") or []
    if not isinstance(entries, list):
        raise ValueError(f"genes must be a list, got {type(entries).__name__}")

    genes = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Gene entry must be a mapping, got {entry!r}")
        symbol = entry.get("symbol", "<missing symbol>")
        try:
            genes.append(_parse_gene(entry))
        except (KeyError, ValueError) as e:
            raise ValueError(f"Invalid entry for gene {symbol}: {e}") from e
    return genes


def _parse_gene(entry: Dict[str, Any]) -> Gene:
    gene = Gene(gene_symbol=entry["symbol"], gene_id=int(entry.get("gene_id", 0)))

    for variant in _as_list(entry.get("variants"), "variants"):
        if not isinstance(variant, dict):
            raise ValueError(f"variant must be a mapping, got {variant!r}")
        gene.add_variant(_parse_variant(variant, gene))

    for result in _as_list(entry.get("priority_results"), "priority_results"):
        if not isinstance(result, dict):
            raise ValueError(f"priority result must be a mapping, got {result!r}")
        gene.add_priority_result(
            PriorityResult(
                priority_type=PriorityType.from_string(result["type"]),
                gene_id=gene.gene_id,
                gene_symbol=gene.gene_symbol,
                score=float(result["score"]),
            )
        )

    return gene


def _parse_variant(data: Dict[str, Any], gene: Gene) -> VariantEvaluation:
    filter_results = [
        FilterResult(FilterType.from_string(name), FilterStatus(str(status).upper()))
        for name, status in _as_mapping(data.get("filters"), "filters").items()
    ]

    frequency_data = None
    if "frequencies" in data:
        frequency_data = FrequencyData(
            rs_id=data.get("rs_id"),
            frequencies=[
                Frequency(FrequencySource[source.upper()], float(value))
                for source, value in _as_mapping(data["frequencies"], "frequencies").items()
            ],
        )

    score = data.get("score")
    pathogenicity = data.get("pathogenicity")
    return VariantEvaluation.build(
        chrom=data["chrom"],
        pos=int(data["pos"]),
        ref=data["ref"],
        alt=data["alt"],
        filter_results=filter_results,
        gene_symbol=gene.gene_symbol,
        gene_id=gene.gene_id,
        variant_effect=VariantEffect.from_string(data.get("effect", "sequence_variant")),
        frequency_data=frequency_data,
        pathogenicity_score=None if pathogenicity is None else float(pathogenicity),
        variant_score=None if score is None else float(score),
    )


def _as_list(value: Any, name: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{name} must be a list, got {type(value).__name__}")
    return value


def _as_mapping(value: Any, name: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a mapping, got {type(value).__name__}")
    return value
