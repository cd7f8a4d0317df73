"""
Dash presentation layer: layout, callbacks and display helpers.
"""
