from .commit_filter_protocol import CommitFilterProtocol

__all__ = ["CommitFilterProtocol"]
