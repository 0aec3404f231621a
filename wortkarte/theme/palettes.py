THEME_PRESETS = {
    "watch": {
        "bg":        (0, 0, 0, 1),
        "primary":   (0x66 / 255, 0xBB / 255, 0x6A / 255, 1),  # German word
        "secondary": (0x4D / 255, 0xB6 / 255, 0xAC / 255, 1),  # translation
        "text":      (1, 1, 1, 1),
        "muted":     (0.75, 0.75, 0.80, 1),
    },
    "light": {
        "bg":        (0.96, 0.97, 1.0, 1),
        "primary":   (0.18, 0.55, 0.22, 1),
        "secondary": (0.00, 0.47, 0.42, 1),
        "text":      (0.10, 0.10, 0.14, 1),
        "muted":     (0.35, 0.38, 0.45, 1),
    },
}

DEFAULT_PRESET = "watch"
