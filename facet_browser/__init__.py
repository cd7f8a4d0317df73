"""
Top-level package for the faceted data browser.

This package exposes the layered architecture (engine, config, services, UI).
Most code should import from submodules such as:
    facet_browser.core
    facet_browser.services
    facet_browser.ui
"""

__all__: list[str] = []
