"""
Member Name Validation

Every module of a glob import becomes a member of the same namespace object,
so each needs a name and no two may share one.
"""

from typing import Dict, Iterable

from ..shared.errors import NameCollisionError, UnresolvableIdentifierError
from .glob_resolver import ChildModule


def validate(modules: Iterable[ChildModule]) -> None:
    """
    Raise on the first module without a name or with a name already taken.

    Names are compared after identifier conversion: `foo-bar.js` and
    `fooBar.js` both become `fooBar` and are reported as colliding.
    """
    seen: Dict[str, str] = {}  # member name -> file it was derived from
    for module in modules:
        if module.derived_name is None:
            raise UnresolvableIdentifierError(
                f"Could not generate a valid identifier for '{module.source_file}'"
            )
        first = seen.get(module.derived_name)
        if first is not None:
            raise NameCollisionError(
                f"Found colliding members '{module.derived_name}'",
                help="rename one of the files or narrow the glob pattern",
                label=f"'{first}' and '{module.source_file}' both map to `{module.derived_name}`",
            )
        seen[module.derived_name] = module.source_file


class CollisionGuard:
    def validate(self, modules: Iterable[ChildModule]) -> None:
        validate(modules)
