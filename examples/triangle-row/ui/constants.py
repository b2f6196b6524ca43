"""Window defaults and color definitions."""
from shardline import ColorClass

# Timing
FPS = 60

# Initial window size (resizable)
SCREEN_W = 960
SCREEN_H = 540

# Colors
BG_COLOR = (39, 88, 105)  # #275869

SLOT_COLORS: dict[ColorClass, tuple[int, int, int]] = {
    ColorClass.PRIMARY: (20, 62, 76),  # #143E4C
    ColorClass.SECONDARY: (251, 38, 59),  # #FB263B
}
