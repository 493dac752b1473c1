"""
Top-level package for the ELLE question browser.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    elle_browser.core
    elle_browser.services
    elle_browser.ui
"""

__all__: list[str] = []
