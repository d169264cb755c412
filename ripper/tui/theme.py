"""
Terminal palette.
"""

BLACK = "#0D0C0C"
DARK_GRAY = "#181616"
CHARCOAL_GRAY = "#282727"
OFF_WHITE = "#C5C9C5"
DIRECTORY_BLUE = "#03A1FC"
SPRING_GREEN = "#87A987"
AUTUMN_RED = "#C4746E"
