"""
Local library modules shared across the Invoice Editor.

Modules:
    logs: Logging utilities
"""

from invoice_editor.lib import logs

__all__ = ["logs"]
