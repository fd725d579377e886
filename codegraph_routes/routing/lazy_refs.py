"""
Lazy Reference Extractor

Pulls module specifiers (and, for lazy components, the consumed export) out of
`loadChildren` / `loadComponent` expression text:

    () => import('./admin/admin.module').then(m => m.AdminModule)
    () => import('@app/settings').then((m) => m.SettingsPageComponent)

Extraction is text based. Callers only see the narrow contract
"expression text -> optional reference".
"""

from __future__ import annotations

import re

from codegraph_routes.infra.logging import get_logger
from codegraph_routes.routing.models import LazyDestinationReference, LazyModuleReference

logger = get_logger(__name__)

# import(...) may span lines
IMPORT_PATTERN = re.compile(r"import\(\s*['\"`]([\s\S]*?)['\"`]\s*\)")
THEN_ACCESS_PATTERN = re.compile(r"\.then\(\s*\(?\s*\w+\s*\)?\s*=>\s*\w+\.(\w+)\s*\)")


def extract_module_reference(expression: str) -> LazyModuleReference | None:
    """Extract the module specifier of a lazy module, or None."""
    match = IMPORT_PATTERN.search(expression)
    if not match or not match.group(1):
        return None
    return LazyModuleReference(specifier=match.group(1))


def extract_destination_reference(expression: str) -> LazyDestinationReference | None:
    """
    Extract the module specifier and the export read in `.then(...)`.

    Both halves are required; a bare `import('...')` without the chained
    access is not a usable lazy component reference.
    """
    imp = IMPORT_PATTERN.search(expression)
    access = THEN_ACCESS_PATTERN.search(expression)
    if imp and imp.group(1) and access and access.group(1):
        return LazyDestinationReference(specifier=imp.group(1), export_name=access.group(1))

    logger.warning("lazy_reference_unrecognized", expression=expression)
    return None
