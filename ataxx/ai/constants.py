# Ataxx Game Constants
SIDE = 7
# Length of a side plus the two-deep blocked border on each edge
EXTENDED_SIDE = SIDE + 4
BOARD_CELLS = EXTENDED_SIDE * EXTENDED_SIDE

# Number of consecutive non-extending moves that ends the game
JUMP_LIMIT = 25

# Search parameters
MAX_DEPTH = 5
# Score of a finished game (positive: red wins, negative: blue wins)
WINNING_VALUE = 10 ** 6
INFINITY = float('inf')

COLUMNS = "abcdefg"
ROWS = "1234567"
PASS_COLUMN = '-'
