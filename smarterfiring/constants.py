"""Game constants and configuration."""

# Window settings
# These are default/fallback values - actual size is calculated from screen
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 900
WINDOW_SCALE = 0.85  # Use 85% of screen height
FPS = 60

# Game rules
GRID_SIZE = 5
SESSION_DURATION = 120  # seconds
HIT_REWARD = 10  # points per dragon
REMOVAL_DELAY = 300  # ms between a hit and the dragon disappearing
TICK_INTERVAL = 1000  # ms per session clock tick

# Colors
COLOR_BACKGROUND_TOP = (128, 0, 128)  # Purple
COLOR_BACKGROUND_BOTTOM = (0, 90, 255)  # Blue
COLOR_BOARD = (0, 0, 0, 77)  # Black at 30%
COLOR_GRID_LINE = (255, 255, 255, 77)
COLOR_CELL_DRAGON = (255, 60, 40, 40)  # Cell under a live dragon
COLOR_CELL_HIT = (255, 230, 0, 60)  # Cell under a burst
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_DIM = (170, 170, 190)
COLOR_PLAYER = (60, 140, 255)
COLOR_FLAME = (255, 60, 40)
COLOR_FLAME_CORE = (255, 165, 0)
COLOR_DRAGON = (220, 30, 30)
COLOR_DRAGON_ARROW = (0, 0, 0)
COLOR_BURST = (255, 230, 0)
COLOR_BUTTON = (40, 110, 230)  # Arrow buttons
COLOR_BUTTON_HOVER = (70, 140, 255)
COLOR_BUTTON_TEXT = (255, 255, 255)
COLOR_BUTTON_GO = (30, 160, 60)  # Next / Start / Play Again
COLOR_BUTTON_GO_HOVER = (50, 190, 80)
COLOR_BUTTON_DANGER = (210, 40, 40)  # Restart / Fire
COLOR_BUTTON_DANGER_HOVER = (240, 70, 70)
COLOR_DOT_ACTIVE = (255, 255, 255)
COLOR_DOT_IDLE = (128, 128, 128)

# Share message shown from the game over screen
SHARE_MESSAGE = "I scored {score} points in Smarterfiring! Can you beat my score?"

# Intro pages: (icon, text)
INSTRUCTION_PAGES = [
    ("controller", "Welcome to Smarterfiring!"),
    ("arrows", "Move your character with the arrow buttons"),
    ("flame", "Tap the fire button to shoot flames"),
    ("burst", "Hit dragons coming from the opposite direction"),
    ("star", "Score points for each dragon you hit"),
    ("clock", "You have 2 minutes to score as much as possible!"),
]

INFO_TITLE = "About Smarterfiring"
INFO_ABOUT = (
    "Smarterfiring is a fast-paced action game where you control a tiny "
    "character and shoot fire at incoming dragons."
)
INFO_RULES = [
    "Move your character with the arrow buttons",
    "Tap the fire button to shoot flames",
    "Only dragons coming from the opposite direction can be hit",
    "Each hit dragon gives you 10 points",
    "Game lasts for 2 minutes",
]
INFO_TIPS = [
    "Position yourself in the center for better coverage",
    "Watch the dragons' directions carefully",
    "Time your shots to hit multiple dragons",
]

# UI Layout (ratios of window size unless noted)
BOARD_SIZE_RATIO = 0.7  # of window width
BOARD_TOP_RATIO = 0.14  # of window height
FIRE_OFFSET = 30  # px at the reference board size
REFERENCE_BOARD_SIZE = 300
HUD_HEIGHT = 110
HUD_PADDING = 20
MENU_BUTTON_WIDTH = 260
MENU_BUTTON_HEIGHT = 56
ARROW_BUTTON_WIDTH = 90
ARROW_BUTTON_HEIGHT = 60
FIRE_BUTTON_RADIUS = 48
