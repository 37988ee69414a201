# texture_generator/registry.py

"""
================================================================================
PATTERN REGISTRY
================================================================================
Two process-wide, name-keyed maps populated once when `catalog` is imported:

- generators: name -> fn(rect) -> Node
- references: name -> fn(rect) -> (dict[name, Node], ordered list of names)

Data Contract:
---------------
- Inputs: Exact, case-sensitive names.
- Outputs: The registered callable, or None when the name is unknown.
- Side Effects: Registration mutates module state; do it at import time only.
- Invariants: After startup the maps are treated as read-only.
================================================================================
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

GeneratorFn = Callable[[object], object]
ReferencesFn = Callable[[object], Tuple[Dict[str, object], List[str]]]

generators: Dict[str, GeneratorFn] = {}
references: Dict[str, ReferencesFn] = {}


def register_generator(name: str, fn: GeneratorFn):
    if name in generators:
        logger.warning(f"Generator '{name}' registered twice; keeping the latest.")
    generators[name] = fn


def register_references(name: str, fn: ReferencesFn):
    references[name] = fn


def get_generator(name: str) -> Optional[GeneratorFn]:
    return generators.get(name)


def get_references(name: str) -> Optional[ReferencesFn]:
    return references.get(name)


def list_names() -> List[str]:
    return sorted(generators)
