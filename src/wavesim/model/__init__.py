"""
The MODEL layer contains the height-field simulation and its settings.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
"""
