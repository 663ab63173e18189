"""
Reflex application entry point for the Invoice Editor.

This module initializes the Reflex app and defines the single page: a
toolbar, then the form and preview side by side on wide screens or as
Edit/Preview tabs on narrow ones.
"""

import os

import reflex as rx

from invoice_editor.components import invoice_form, invoice_preview, toolbar
from invoice_editor.lib import logs
from invoice_editor.models.common import ViewMode
from invoice_editor.services import get_exporter
from invoice_editor.state import APP_TITLE, EditorState

LOG = logs.logger(__file__)

APP_PORT = int(os.getenv("INVOICE_EDITOR_PORT", "8000"))

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def page_header() -> rx.Component:
    """Build the title at the top of the page."""
    return rx.box(
        rx.heading(APP_TITLE, size="7", as_="h1"),
        class_name="page-header",
    )


def _panel(title: str, body: rx.Component) -> rx.Component:
    return rx.box(
        rx.heading(title, size="4", as_="h2"),
        body,
        class_name="card panel",
    )


def split_layout() -> rx.Component:
    """Form and preview side by side."""
    return rx.box(
        _panel("Invoice Details", invoice_form()),
        _panel("Preview", invoice_preview()),
        class_name="split-layout",
    )


def tabbed_layout() -> rx.Component:
    """Form and preview as tabs bound to the session view."""
    return rx.tabs.root(
        rx.tabs.list(
            rx.tabs.trigger("Edit", value=ViewMode.EDIT.value),
            rx.tabs.trigger("Preview", value=ViewMode.PREVIEW.value),
            class_name="tab-list",
        ),
        rx.tabs.content(invoice_form(), value=ViewMode.EDIT.value),
        rx.tabs.content(invoice_preview(), value=ViewMode.PREVIEW.value),
        value=EditorState.view,
        on_change=EditorState.set_view,
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component with header, toolbar and editor.
    """
    return rx.box(
        rx.box(
            page_header(),
            toolbar(),
            rx.mobile_and_tablet(tabbed_layout()),
            rx.desktop_only(split_layout()),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

# Unknown INVOICE_EDITOR_EXPORTER values fail here instead of on first export
get_exporter()

app.add_page(
    index,
    title=APP_TITLE,
    description="Create an invoice, preview it and export it as a PDF.",
    on_load=EditorState.on_load,
)


def main() -> None:
    """Entrypoint for `invoice-editor`; runs `reflex run` on APP_PORT."""
    import subprocess
    import sys

    LOG.info("Starting Invoice Editor on port %s", APP_PORT)
    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(APP_PORT)]
    )


if __name__ == "__main__":
    main()
