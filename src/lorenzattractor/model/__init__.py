"""
The MODEL layer contains pure data structures and numerics.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with the Lorenz integration, the reveal animation and segment colors.
"""
