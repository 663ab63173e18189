"""
Invoice Editor: a Reflex application for building and exporting invoices.

A user fills in company and client details and line items, watches a
live-computed preview, and downloads the invoice as an A4 PDF.

Subpackages:
- components: Reflex UI components (form, preview, toolbar)
- models: Invoice, currency and session models plus Reflex view models
- services: Export implementations (PDF)
- lib: Logging utilities
- utils: Parsing and formatting helpers

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
