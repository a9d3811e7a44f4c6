"""Protocol definitions for host-provided collaborators."""

from .document import DocumentView, LineView

__all__ = ["DocumentView", "LineView"]
