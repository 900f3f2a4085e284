"""
Rebuilding the crate tree from Serato's flat crate names.

Serato stores every crate, nested or not, as one file in the Subcrates
folder. Nesting is encoded in the name: "House%%Deep%%Late" is the crate
"Late" inside "Deep" inside the top-level crate "House".
"""

from typing import Iterable

from loguru import logger

from .models import Crate

SUBCRATE_DELIMITER = "%%"

PathKey = tuple[str, ...]


def split_crate_name(name: str, delimiter: str = SUBCRATE_DELIMITER) -> PathKey:
    """Split an encoded crate name into its path key.

    Empty pieces are kept: "A%%" gives ("A", "").
    """
    return tuple(name.split(delimiter))


def reconstruct_crate_tree(
    crates: Iterable[Crate], delimiter: str = SUBCRATE_DELIMITER
) -> list[Crate]:
    """Nest a flat list of crates by their encoded names.

    Crates are handled in descending path-key order so every child is
    attached to its parent before the parent itself is attached further up.
    Each attached crate is renamed to the last piece of its path key. A
    crate whose parent path key is not present is dropped along with any
    children already attached to it.

    Ordering: top-level crates and each crate's subcrates come out in
    ascending path-key order. If two input crates share a path key, the
    later one wins and the earlier one is dropped.

    Args:
        crates: Resolved crates with full encoded names and no subcrates
        delimiter: Separator between name pieces

    Returns:
        Top-level crates with their subcrates attached
    """
    by_key: dict[PathKey, Crate] = {}
    for crate in crates:
        key = split_crate_name(crate.name, delimiter)
        if key in by_key:
            logger.debug(f"Duplicate crate path {crate.name!r}, keeping the later one")
        by_key[key] = crate

    for key in sorted(by_key, reverse=True):
        if len(key) == 1:
            continue

        crate = by_key[key]
        parent = by_key.get(key[:-1])
        if parent is None:
            logger.debug(f"Dropping crate {crate.name!r}: parent crate not found")
            continue

        crate.name = key[-1]
        # Siblings arrive in descending order; insert at the front to keep them ascending.
        parent.subcrates.insert(0, crate)

    return [by_key[key] for key in sorted(by_key) if len(key) == 1]
