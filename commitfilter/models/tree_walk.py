"""Reading commit trees as flat path maps and walking several at once."""

from typing import Dict, Iterator, List, NamedTuple, Sequence, Tuple

from git.exc import GitCommandError, ODBError

from ..exceptions import TreeReadError

# Errors the object store may raise while a tree is resolved or traversed
READ_ERRORS = (ODBError, GitCommandError, ValueError, OSError)


class TreeEntry(NamedTuple):
    mode: int
    binsha: bytes

    @property
    def hexsha(self) -> str:
        return self.binsha.hex()


MISSING_ENTRY = TreeEntry(0, b"\x00" * 20)


def read_tree_entries(commit) -> Dict[str, TreeEntry]:
    """Return every leaf entry of the commit's tree keyed by full path.

    Subtrees are flattened; only blobs, symlinks and gitlinks are reported.
    Any failure of the object store is raised as TreeReadError.
    """
    entries: Dict[str, TreeEntry] = {}
    try:
        for item in commit.tree.traverse():
            if item.type == "tree":
                continue
            entries[item.path] = TreeEntry(item.mode, item.binsha)
    except READ_ERRORS as e:
        raise TreeReadError(commit.hexsha, str(e)) from e
    return entries


def _path_bytes(path: str) -> bytes:
    return path.encode("utf-8", "surrogateescape")


def walk_trees(
    trees: Sequence[Dict[str, TreeEntry]],
) -> Iterator[Tuple[str, List[TreeEntry]]]:
    """Walk flattened trees in step.

    Yields each path found in any tree, in git's byte-wise order, together
    with one entry per tree (MISSING_ENTRY where the tree lacks the path).
    """
    paths = set()
    for tree in trees:
        paths.update(tree)
    # Undecodable name bytes are held as surrogates; compare the raw bytes
    for path in sorted(paths, key=_path_bytes):
        yield path, [tree.get(path, MISSING_ENTRY) for tree in trees]
