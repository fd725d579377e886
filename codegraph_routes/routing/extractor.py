"""
Declaration Extractor

Finds route object literals in the top-level array-valued variables of a unit.
"""

from __future__ import annotations

from codegraph_routes.infra.logging import get_logger
from codegraph_routes.parsing.source_index import SourceIndex
from codegraph_routes.routing.models import RawRouteLiteral

logger = get_logger(__name__)


class DeclarationExtractor:
    """
    Extracts raw route literals without interpreting them.

    Only arrays that directly initialize a top-level variable are scanned;
    nested arrays (e.g. `children`) are left to the decoder.
    """

    def __init__(self, index: SourceIndex):
        self.index = index

    def extract(self, unit_path: str) -> list[RawRouteLiteral]:
        logger.info("parsing_routing_file", file=unit_path)
        unit = self.index.get_unit(unit_path)
        if unit is None:
            logger.error("unit_not_found", file=unit_path)
            return []

        literals: list[RawRouteLiteral] = []
        for var_decl in unit.variables():
            if var_decl.value is None or var_decl.value.type != "array":
                continue
            for element in var_decl.value.named_children:
                if element.type == "object":
                    literals.append(RawRouteLiteral(unit=unit, node=element))

        logger.debug("route_literals_found", file=unit.path, count=len(literals))
        return literals
