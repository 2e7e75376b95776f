"""Git commit functionality for AI-Git."""

from .command import CommitCommand, CommitState, ResolvedProvider, resolve_provider
from .interactive import CommitUI, ReviewAction
from .message import CommitMessage

__all__ = [
	"CommitCommand",
	"CommitMessage",
	"CommitState",
	"CommitUI",
	"ResolvedProvider",
	"ReviewAction",
	"resolve_provider",
]
