"""
Human-readable dump of a loaded Serato library.

Read-only: tracks and crates are printed in the order the Library stores
them.
"""

from typing import Iterable, Iterator, Optional

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from serato_library.core.console import get_console
from serato_library.domain.library.models import Crate, Library


def iter_crates(crates: Iterable[Crate], depth: int = 0) -> Iterator[tuple[int, Crate]]:
    """Walk a crate forest depth-first, yielding (depth, crate) parents first."""
    for crate in crates:
        yield depth, crate
        yield from iter_crates(crate.subcrates, depth + 1)


def _crate_label(crate: Crate) -> Text:
    label = Text(crate.name or "(unnamed)", style="bold")
    label.append(f"  {len(crate.tracks)} tracks", style="dim")
    if crate.version:
        label.append(f"  v{crate.version}", style="dim")
    return label


def _add_crates(node: Tree, crates: Iterable[Crate]) -> None:
    for crate in crates:
        branch = node.add(_crate_label(crate))
        for track in crate.tracks:
            branch.add(Text(track.path))
        _add_crates(branch, crate.subcrates)


def build_crate_tree(crates: list[Crate]) -> Tree:
    """Build a Rich Tree of a crate forest with each crate's track paths."""
    total = sum(1 for _ in iter_crates(crates))
    tree = Tree(Text(f"Crates ({total})", style="bold cyan"))
    _add_crates(tree, crates)
    return tree


def render_library(library: Library, console: Optional[Console] = None) -> None:
    """Print every track path, then the crate forest."""
    console = console or get_console()

    console.print(
        Text(f"Library contains {len(library.tracks)} tracks (version {library.version or '?'}):")
    )
    for track in library.tracks:
        console.print(Text(f"  Path: {track.path}"))

    console.print()
    console.print(build_crate_tree(library.crates))
