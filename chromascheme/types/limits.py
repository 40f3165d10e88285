# No dependencies
HUE_MAX = 360
CHANNEL_MAX = 255
PERCENT_MAX = 100
ALPHA_MAX = 1.0

# sRGB linearisation (WCAG 2.x relative luminance)
SRGB_LINEAR_THRESHOLD = 0.03928
SRGB_LINEAR_DIVISOR = 12.92
SRGB_GAMMA_OFFSET = 0.055
SRGB_GAMMA_SCALE = 1.055
SRGB_GAMMA = 2.4
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Above this relative luminance a color reads as "light"
LIGHT_LUMINANCE_THRESHOLD = 0.35
