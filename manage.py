"""
This is the main file to run the game.
It imports the game class from the grid_invaders package and runs it.
"""

from grid_invaders.app import GridInvaders

if __name__ == "__main__":
    game = GridInvaders()
    game.run()
