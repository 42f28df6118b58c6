"""FlowBoard: multi-tenant note-taking API."""

__version__ = "0.1.0"
