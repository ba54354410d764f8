# --- Window ---
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
CELL_SIZE = 25
FPS = 60
WINDOW_TITLE = "Simple Maze Generator"

# --- Instruction line ---
INSTRUCTIONS = "Press space to regenerate | Esc to exit"
FONT_SIZE = 14

# --- Headless defaults (cells) ---
DEFAULT_WIDTH = WINDOW_WIDTH // CELL_SIZE
DEFAULT_HEIGHT = WINDOW_HEIGHT // CELL_SIZE


def grid_size(window_width: int, window_height: int, cell_size: int = CELL_SIZE):
    """Number of (columns, rows) of cell_size pixels that fit in the window."""
    if cell_size <= 0:
        raise ValueError(f"Cell size must be positive, got {cell_size}")
    cols = window_width // cell_size
    rows = window_height // cell_size
    if cols <= 0 or rows <= 0:
        raise ValueError(f"Window {window_width}x{window_height} is smaller than one {cell_size}px cell")
    return cols, rows
