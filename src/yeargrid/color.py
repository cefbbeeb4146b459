# SPDX-License-Identifier: MIT

# Default color for done days
MARKED_COLOR = "spring_green3"

UNMARKED_COLOR = "grey85"
MONTH_LABEL_COLOR = "grey50"

VALID_MARKED_COLORS = [
    "green",
    "bright_green",
    "spring_green3",
    "green3",
    "dark_green",
    "cyan",
    "blue",
    "magenta",
    "yellow",
    "gold",
    "orange",
    "dark_orange",
]


def is_valid_marked_color(color: str) -> bool:
    return color in VALID_MARKED_COLORS
