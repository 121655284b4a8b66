"""
Lianliankan core Python package.

This package contains the data structures and pure-logic helpers of the
tile-matching rule engine, kept separate from the Flask app and the CLI so
they can be tested on their own.
Modules:
- board.py: Symbol, Tile, Board, Coord, PALETTE
- errors.py: InvalidDimensionsError, InvalidArgumentError
- deal.py: create_board and the shuffle it relies on
- pathfind.py: find_path, can_connect
- session.py: commit_match, find_hint, has_moves, is_cleared, reshuffle
"""
