"""
UI subpackage.

Notebook display helpers; import ``hexwall.ui.marimo`` explicitly.
"""
