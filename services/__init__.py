"""
Services that sit between the game engine and the outside world.
"""
