COLS, ROWS = 10, 15

CONFIG = {
    "BLOCK_SIZE": 30,
    "INITIAL_DROP_MS": 1000,
    "MIN_DROP_MS": 50,
    "SPEEDUP": 0.8,
    "LINES_PER_LEVEL": 5,
    "LINE_SCORE": 100,
    "LEVEL_RULE": "cumulative",   # or "per_clear"
    "SEED": None,
    "THEME": "dark",
    "FPS": 60,
    "LOG_LEVEL": "WARNING",
}

THEMES = {
    "dark": {"bg": (17, 24, 39), "board": (31, 41, 55), "border": (55, 65, 81),
             "text": (229, 231, 235), "muted": (156, 163, 175)},
    "light": {"bg": (249, 250, 251), "board": (255, 255, 255), "border": (229, 231, 235),
              "text": (17, 24, 39), "muted": (107, 114, 128)},
}
