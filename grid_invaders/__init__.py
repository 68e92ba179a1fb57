"""
Grid Invaders: shoot down the descending enemy grid before it reaches you.
"""
