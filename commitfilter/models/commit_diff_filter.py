"""Commit filter that computes the file changes introduced by each commit."""

from typing import Callable, Dict, List, Optional, Sequence

from ..schemas import ChangeType, FileChange
from .tree_walk import TreeEntry, read_tree_entries, walk_trees

ChangesHook = Callable[[object, List[FileChange]], bool]


def accept_all(commit, changes: List[FileChange]) -> bool:
    return True


class CommitDiffFilter:
    """Computes per-commit file changes and hands them to a decision hook.

    Root commits are diffed against the empty tree and single-parent commits
    against their parent. For merges a path is reported only when the merge
    result differs from every parent; matching any one parent means the merge
    took that side verbatim.

    The hook receives ``(commit, changes)`` and its result decides whether the
    commit is included. Subclasses may override :meth:`include_changes`
    instead of passing a hook.
    """

    def __init__(
        self, on_changes: Optional[ChangesHook] = None, abbrev_length: int = 7
    ):
        self.on_changes = on_changes or accept_all
        self.abbrev_length = abbrev_length

    def include(self, commit) -> bool:
        changes = self.compute_changes(commit)
        return bool(self.include_changes(commit, changes))

    def __call__(self, commit) -> bool:
        return self.include(commit)

    def include_changes(self, commit, changes: List[FileChange]) -> bool:
        return self.on_changes(commit, changes)

    def clone(self) -> "CommitDiffFilter":
        # No per-instance mutable state
        return self

    def compute_changes(
        self, commit, parents: Optional[Sequence] = None
    ) -> List[FileChange]:
        """Return the changes introduced by ``commit`` relative to its parents."""
        if parents is None:
            parents = commit.parents
        current = read_tree_entries(commit)

        if not parents:
            return self._diff_trees({}, current)
        if len(parents) == 1:
            return self._diff_trees(read_tree_entries(parents[0]), current)
        return self._diff_merge([read_tree_entries(p) for p in parents], current)

    def _diff_trees(
        self, old: Dict[str, TreeEntry], new: Dict[str, TreeEntry]
    ) -> List[FileChange]:
        changes = []
        for path, (old_entry, new_entry) in walk_trees([old, new]):
            if old_entry == new_entry:
                continue
            if old_entry.mode == 0:
                change_type = ChangeType.ADDED
            elif new_entry.mode == 0:
                change_type = ChangeType.DELETED
            else:
                change_type = ChangeType.MODIFIED
            changes.append(
                self._make_change(
                    path,
                    new_entry,
                    change_type,
                    old_mode=old_entry.mode,
                    old_object_id=old_entry.hexsha,
                )
            )
        return changes

    def _diff_merge(
        self, parents: List[Dict[str, TreeEntry]], current: Dict[str, TreeEntry]
    ) -> List[FileChange]:
        changes = []
        for path, entries in walk_trees(parents + [current]):
            current_entry = entries[-1]
            current_mode = current_entry.mode
            parent_mode = 0
            same = False
            for entry in entries[:-1]:
                same = entry == current_entry
                if same:
                    break
                parent_mode |= entry.mode
            if same:
                continue

            if parent_mode == 0 and current_mode != 0:
                change_type = ChangeType.ADDED
            elif parent_mode != 0 and current_mode == 0:
                change_type = ChangeType.DELETED
            else:
                change_type = ChangeType.MODIFIED
            changes.append(self._make_change(path, current_entry, change_type))
        return changes

    def _make_change(
        self, path: str, entry: TreeEntry, change_type: ChangeType, **old
    ) -> FileChange:
        object_id = entry.hexsha
        return FileChange(
            path=path,
            change_type=change_type,
            mode=entry.mode,
            object_id=object_id,
            abbreviated_id=object_id[: self.abbrev_length],
            **old,
        )
