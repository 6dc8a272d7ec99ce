"""Run the game from a source checkout: python PixelStrike.py [--scale N]"""

from pixelstrike.app import main

if __name__ == "__main__":
    main()
