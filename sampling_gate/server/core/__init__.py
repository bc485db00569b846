"""
Server Core.

Application constants and the settings model loaded from the environment.
"""
