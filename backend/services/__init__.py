"""
Collaborators around the game core: the tick timer and the renderers.
"""
