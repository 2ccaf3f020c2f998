import os
from io import BytesIO
from pathlib import Path

import pytest
from git import Actor, Blob, Commit, Repo, Tree
from gitdb import IStream

JANE = Actor("Jane Doe", "jane@example.com")


class RepoBuilder:
    """Builds commits with exact tree contents through the index API."""

    def __init__(self, path: Path):
        self.path = path
        self.repo = Repo.init(path)
        self.count = 0

    def commit(self, files, parents=(), message=None, executable=(), author=JANE):
        self.count += 1
        index = self.repo.index
        index.entries.clear()
        for rel_path, content in files.items():
            target = self.path / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
            os.chmod(target, 0o755 if rel_path in executable else 0o644)
        if files:
            index.add(sorted(files))
        return index.commit(
            message or f"Commit {self.count}",
            parent_commits=list(parents),
            author=author,
            committer=author,
            head=False,
        )

    def commit_raw_names(self, names, message=None, author=JANE):
        """Commit a flat tree whose entry names are given as raw bytes."""
        self.count += 1
        data = b""
        for name in sorted(names):
            blob = self.repo.odb.store(IStream(Blob.type, len(name), BytesIO(name)))
            data += b"100644 " + name + b"\x00" + blob.binsha
        tree = self.repo.odb.store(IStream(Tree.type, len(data), BytesIO(data)))
        return Commit.create_from_tree(
            self.repo,
            Tree(self.repo, tree.binsha, path=""),
            message or f"Commit {self.count}",
            parent_commits=[],
            head=False,
            author=author,
            committer=author,
        )

    def set_head(self, commit):
        head = self.repo.create_head("main", commit, force=True)
        self.repo.head.reference = head
        return head


@pytest.fixture
def repo_builder(tmp_path):
    return RepoBuilder(tmp_path / "repo")
