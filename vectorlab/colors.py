# -*- coding: utf-8 -*-
"""Colour palette for source vectors."""
import random

# Colour-blind friendly
VECTOR_COLORS = [
    "#E69F00",  # orange
    "#56B4E9",  # light blue
    "#009E73",  # green
    "#F0E442",  # yellow
    "#0072B2",  # dark blue
    "#D55E00",  # red
    "#CC79A7",  # pink
    "#999999",  # grey
]


def hex_to_rgb(hex_str):
    """Converts #RRGGBB to (R, G, B) tuple."""
    hex_str = hex_str.lstrip('#')
    if len(hex_str) != 6:
        raise ValueError(f"Expected a #RRGGBB colour, got {hex_str!r}")
    return tuple(int(hex_str[i:i+2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb):
    return "#" + "".join(f"{int(c):02x}" for c in rgb)


def random_color(rng=None):
    rng = rng or random
    return rng.choice(VECTOR_COLORS)


def next_color(used_colors=(), rng=None):
    """First palette colour not in use; a random one once all are taken."""
    used = {c.upper() for c in used_colors}
    for color in VECTOR_COLORS:
        if color.upper() not in used:
            return color
    return random_color(rng)


def lighter_color(hex_color, amount=80):
    """Adds `amount` to each channel, clamped at 255."""
    return rgb_to_hex(min(255, c + amount) for c in hex_to_rgb(hex_color))
