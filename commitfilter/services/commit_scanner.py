"""Walks repository history and applies commit filters."""

from typing import List, Optional

from git import Repo
from git.exc import ODBError

from ..exceptions import RevisionNotFoundError
from ..models import CommitDiffFilter, SignedOffByFilter
from ..protocols import CommitFilterProtocol
from ..schemas import CommitChanges, CommitSummary, FileChange, PersonIdent


def summarize_commit(commit) -> CommitSummary:
    return CommitSummary(**_summary_fields(commit))


def _summary_fields(commit) -> dict:
    return {
        "commit": commit.hexsha,
        "parents": [parent.hexsha for parent in commit.parents],
        "author": commit.author.name,
        "author_email": commit.author.email,
        "authored_date": commit.authored_date,
        "summary": commit.summary,
    }


class CommitScanner:
    """Runs commit filters over the history reachable from a revision."""

    def __init__(self, repo: Repo, abbrev_length: int = 7):
        self.repo = repo
        self.abbrev_length = abbrev_length

    def iter_commits(
        self, rev: str = "HEAD", max_count: Optional[int] = None, paths=""
    ):
        """Iterate commits reachable from ``rev`` in the repository's default order."""
        try:
            start = self.repo.commit(rev)
        except (ODBError, ValueError) as e:
            print(f"Failed to resolve revision {rev}: {e}")
            raise RevisionNotFoundError(rev) from e

        kwargs = {}
        if max_count is not None:
            kwargs["max_count"] = max_count
        return self.repo.iter_commits(start, paths, **kwargs)

    def scan(
        self,
        commit_filter: CommitFilterProtocol,
        rev: str = "HEAD",
        max_count: Optional[int] = None,
        paths="",
    ) -> list:
        """Return the commits included by ``commit_filter``.

        The filter is cloned first so that concurrent scans never share an
        instance.
        """
        active = commit_filter.clone()
        print(f"Scanning commits from {rev}")
        commits = self.iter_commits(rev, max_count, paths)
        matched = [commit for commit in commits if active.include(commit)]
        print(f"Scan of {rev} finished: {len(matched)} matching commits")
        return matched

    def collect_changes(
        self, rev: str = "HEAD", max_count: Optional[int] = None
    ) -> List[CommitChanges]:
        """Compute the file changes of every commit reachable from ``rev``."""
        collected: List[CommitChanges] = []

        def record(commit, changes: List[FileChange]) -> bool:
            collected.append(CommitChanges(changes=changes, **_summary_fields(commit)))
            return True

        diff_filter = CommitDiffFilter(
            on_changes=record, abbrev_length=self.abbrev_length
        )
        self.scan(diff_filter, rev, max_count)
        return collected

    def find_signed_off(
        self, person: PersonIdent, rev: str = "HEAD", max_count: Optional[int] = None
    ) -> List[CommitSummary]:
        """Return commits carrying a Signed-off-by trailer for ``person``."""
        commits = self.scan(SignedOffByFilter(person), rev, max_count)
        return [summarize_commit(commit) for commit in commits]
