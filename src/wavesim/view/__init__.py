"""
The VIEW layer: Qt widgets and the PyVista surface. Reads from the controller,
never runs the simulation itself.
"""
