"""
Components package.

Each component owns one concern of the scan -> collapse -> render pipeline
and takes everything it needs as parameters.
"""
