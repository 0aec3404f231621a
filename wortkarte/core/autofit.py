from __future__ import annotations

from typing import Callable

from wortkarte.core.logging_utils import log


DEFAULT_DECAY = 0.9
DEFAULT_MIN_SIZE = 6.0
DEFAULT_MAX_ITERATIONS = 50


def fit_font_size(
    text: str,
    max_size: float,
    width: float,
    measure: Callable[[str, float], float],
    decay: float = DEFAULT_DECAY,
    min_size: float = DEFAULT_MIN_SIZE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> float:
    """
    Largest font size (max_size * decay**k) at which `text` rendered on one
    line is not wider than `width`.

    measure(text, size) must return the rendered line width at that size.
    The result never goes below min_size; at that point the text is clipped.
    After max_iterations measurements the last measured size is returned.
    """
    if not 0 < decay < 1:
        raise ValueError(f"decay must be between 0 and 1, got {decay}")
    if max_size <= 0:
        raise ValueError(f"max_size must be positive, got {max_size}")

    size = float(max_size)
    floor = min(float(min_size), size)
    last_measured = size

    for _ in range(max(1, int(max_iterations))):
        last_measured = size
        if measure(text, size) <= width:
            return size

        next_size = size * decay
        if next_size < floor:
            log(f"autofit hit minimum size {floor} for {text!r} (width={width})", level="debug")
            return floor
        size = next_size

    # iteration cap: keep the smallest size that was actually measured
    log(f"autofit gave up after {max_iterations} steps for {text!r} (width={width})", level="debug")
    return last_measured
