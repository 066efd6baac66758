"""ANSI escape sequences for colouring text and moving the terminal cursor."""

ESC = "\x1b["

# Screen manipulation
RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J\x1b[H"
CLEAR_LINE = "\x1b[2k\r"

# Text colours
BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"

# Text style
BOLD = "\x1b[1m"
ITALIC = "\x1b[3m"
UNDERLINE = "\x1b[4m"

# Text background colours
BG_BLACK = "\x1b[40m"
BG_RED = "\x1b[41m"
BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"
BG_BLUE = "\x1b[44m"
BG_MAGENTA = "\x1b[45m"
BG_CYAN = "\x1b[46m"
BG_WHITE = "\x1b[47m"


def _csi(*params: int, final: str) -> str:
    return ESC + ";".join(str(int(p)) for p in params) + final


def cursor_up(n: int) -> str:
    """Move the cursor n lines up."""
    return _csi(n, final="A")


def cursor_down(n: int) -> str:
    """Move the cursor n lines down."""
    return _csi(n, final="B")


def cursor_forward(n: int) -> str:
    """Move the cursor n columns right."""
    return _csi(n, final="C")


def cursor_back(n: int) -> str:
    """Move the cursor n columns left."""
    return _csi(n, final="D")


def cursor_next_line(n: int) -> str:
    """Move the cursor to the start of the line n lines down."""
    return _csi(n, final="E")


def cursor_previous_line(n: int) -> str:
    """Move the cursor to the start of the line n lines up."""
    return _csi(n, final="F")


def text_rgb(r: int, g: int, b: int) -> str:
    """Set the text colour to an RGB value (0-255 per channel)."""
    return _csi(38, 2, r, g, b, final="m")


def background_rgb(r: int, g: int, b: int) -> str:
    """Set the background colour to an RGB value (0-255 per channel)."""
    return _csi(48, 2, r, g, b, final="m")


def move_cursor(x: int, y: int) -> str:
    """Move the cursor to row x, column y."""
    return _csi(x, y, final="H")