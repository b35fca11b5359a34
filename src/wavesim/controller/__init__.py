"""
The CONTROLLER layer turns the frame clock and the user's settings into
simulation steps.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
"""
