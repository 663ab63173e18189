"""
Common session state models for the Invoice Editor.

The editor keeps its UI flags as explicit finite states instead of loose
booleans:

- ViewMode: which pane is shown on narrow screens (edit form or preview)
- ExportStatus: progress of the single in-flight PDF export
"""

from enum import Enum


class ViewMode(str, Enum):
    """Active pane on narrow layouts."""

    EDIT = "edit"
    PREVIEW = "preview"


class ExportStatus(str, Enum):
    """Lifecycle of a PDF export."""

    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def busy(self) -> bool:
        """True while an export is running."""
        return self is ExportStatus.IN_PROGRESS
