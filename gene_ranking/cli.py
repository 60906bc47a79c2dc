"""
Command-line interface for the gene ranking engine.

Usage:
    python -m gene_ranking --input genes.yaml --mode AR
    gene-ranking --input genes.yaml --config configs/engine.yaml
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import EngineConfig
from .loaders import load_genes
from .model.inheritance import ModeOfInheritance
from .scoring import GeneScorer


@click.command()
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(exists=True),
    required=True,
    help="Path to YAML file of filtered and prioritized genes",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    default=None,
    help="Path to YAML configuration file",
)
@click.option(
    "--mode",
    "-m",
    type=str,
    default=None,
    help="Override mode of inheritance (e.g. AD, AR, XD, XR)",
)
@click.option(
    "--top",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Override number of genes to report",
)
@click.option(
    "--verbose/--quiet",
    "-v/-q",
    default=None,
    help="Enable/disable verbose output",
)
@click.version_option(version=__version__, prog_name="gene-ranking")
def main(input_path: str, config: str, mode: str, top: int, verbose: bool) -> None:
    """
    Gene Ranking Engine

    Score candidate genes from their filtered variants and prioritizer
    results under a mode of inheritance, and print them best first.

    Example:
        python -m gene_ranking --input genes.yaml --mode AR
    """
    try:
        engine_config = EngineConfig.from_yaml(config) if config else EngineConfig()

        # Apply overrides
        if mode:
            engine_config.mode_of_inheritance = ModeOfInheritance.from_string(mode)
        if top is not None:
            engine_config.top_n = top
        if verbose is not None:
            engine_config.verbose = verbose

        logging.basicConfig(
            level=logging.INFO if engine_config.verbose else logging.WARNING,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

        genes = load_genes(Path(input_path))
        scorer = GeneScorer(engine_config.scorer)
        result = scorer.rank(genes, engine_config.mode_of_inheritance)

        click.echo(result.summary(engine_config.top_n))

    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Invalid input: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
