"""
The VIEW layer: Qt window and PyVista rendering. Reads the state, draws it.
"""
