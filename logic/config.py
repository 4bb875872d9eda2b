"""
Game configuration for console TicTacToe.
All the fixed settings for the board, players and console text.
"""


class GameConfig:
    """
    Configuration class for game settings.
    These are fixed for a standard 3x3 game.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Cells the computer prefers once there is nothing to win or block
    CENTER = (1, 1)
    CORNERS = [(0, 0), (0, 2), (2, 0), (2, 2)]

    # ==================== PLAYER SETTINGS ====================
    PLAYER1_NAME = "Player 1"
    PLAYER2_NAME = "Player 2"
    COMPUTER_NAME = "Computer"

    # Game modes offered by the startup menu
    MODE_HUMAN_VS_HUMAN = 1
    MODE_HUMAN_VS_COMPUTER = 2
    VALID_MODES = (MODE_HUMAN_VS_HUMAN, MODE_HUMAN_VS_COMPUTER)

    # ==================== CONSOLE TEXT ====================
    WELCOME = "Welcome to Tic Tac Toe!"
    MENU = "Choose game mode:\n1. Human vs Human\n2. Human vs Computer"
    INVALID_CHOICE = "Invalid choice! Please enter 1 or 2: "
    MOVE_PROMPT = "Enter row and column (0-2): "
    INVALID_INPUT = "Invalid input! Please enter numbers between 0 and 2: "
    INVALID_MOVE = "Invalid move. Try again."
    DRAW_MESSAGE = "It's a draw!"

    # ==================== DEBUG SETTINGS ====================
    # Print which heuristic rule picked the computer's move
    VERBOSE = False
