"""AI-Git - the git workflow with AI-written commit messages."""

__version__ = "0.2.0"
