"""
Creational design pattern examples.

Factory Method (2D game objects), Abstract Factory (GUI widgets and database
connectors) and Builder with Director (RPG characters), each with a client
function that exercises it and prints to standard output.
"""

__version__ = "0.1.0"
