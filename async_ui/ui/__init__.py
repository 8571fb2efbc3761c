"""
UI layer.

Provides:
- binding: setters, listener wiring and feedback suppression for Qt widgets
- models: item models backing bound list and table views
"""
