"""slntree - Rebuild the project hierarchy of Visual Studio solution files."""

from slntree.pipeline import build_solution, enrich_solution, parse_solution

__version__ = "0.1.0"
__all__ = ["build_solution", "enrich_solution", "parse_solution"]
