"""
Centralized Textual CSS for the terminal UI.
"""

from ripper.tui.theme import (
    AUTUMN_RED,
    BLACK,
    CHARCOAL_GRAY,
    DARK_GRAY,
    DIRECTORY_BLUE,
    OFF_WHITE,
    SPRING_GREEN,
)


APP_CSS = """
Screen {
    background: %(BLACK)s;
    color: %(OFF_WHITE)s;
}
#root {
    height: 1fr;
    layout: vertical;
    background: %(DARK_GRAY)s;
    padding: 0 1;
}
#path-bar {
    height: auto;
    padding: 1 0;
}
#path-text {
    width: 1fr;
    text-style: bold;
    content-align: left middle;
}
#notice-bar {
    height: auto;
    border: solid %(SPRING_GREEN)s;
    background: %(CHARCOAL_GRAY)s;
    padding: 0 1;
    display: none;
}
#notice-bar.-visible {
    display: block;
}
#notice-bar.-failed {
    border: solid %(AUTUMN_RED)s;
}
#notice-text {
    width: 1fr;
}
#entry-list {
    height: 1fr;
    border: solid %(CHARCOAL_GRAY)s;
    background: %(DARK_GRAY)s;
}
#entry-list:focus {
    border: solid %(DIRECTORY_BLUE)s;
}
Button {
    background: %(BLACK)s;
    color: %(OFF_WHITE)s;
    border: solid %(CHARCOAL_GRAY)s;
    margin-left: 1;
}
Button#exit {
    border: solid %(AUTUMN_RED)s;
    color: %(AUTUMN_RED)s;
}
""" % {
    "BLACK": BLACK,
    "DARK_GRAY": DARK_GRAY,
    "CHARCOAL_GRAY": CHARCOAL_GRAY,
    "OFF_WHITE": OFF_WHITE,
    "DIRECTORY_BLUE": DIRECTORY_BLUE,
    "SPRING_GREEN": SPRING_GREEN,
    "AUTUMN_RED": AUTUMN_RED,
}
