# flappy/__main__.py
# -------------------------------------------------------------
# python -m flappy
# Licence: MIT
# -------------------------------------------------------------

from .app import main

main()
