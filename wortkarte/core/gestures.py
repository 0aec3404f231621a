"""
Drag-delta classification.

Deltas are in screen orientation: positive dy points DOWN (towards the bottom
of the watch face). Kivy reports y upwards, so widgets negate touch.dy first.
"""

# Intents
NEXT_WORD = "next_word"
REVEAL = "reveal"
HIDE = "hide"
NONE = "none"

INTENTS = (NEXT_WORD, REVEAL, HIDE, NONE)

# Swipe policies for the "next word" gesture
BIDIRECTIONAL = "bidirectional"
RIGHT_ONLY = "right_only"

SWIPE_POLICIES = (BIDIRECTIONAL, RIGHT_ONLY)

DEFAULT_THRESHOLD = 20


def classify_drag(dx: float, dy: float, threshold: float = DEFAULT_THRESHOLD,
                  policy: str = BIDIRECTIONAL) -> str:
    if policy not in SWIPE_POLICIES:
        raise ValueError(f"unknown swipe policy: {policy!r}")

    # horizontal dominance; ties count as vertical
    if abs(dx) > abs(dy):
        if policy == RIGHT_ONLY:
            return NEXT_WORD if dx > threshold else NONE
        return NEXT_WORD if abs(dx) > threshold else NONE

    if dy < -threshold:
        return REVEAL
    if dy > threshold:
        return HIDE
    return NONE


class GestureClassifier:
    """Stateless classifier with a fixed threshold and swipe policy."""

    def __init__(self, threshold: float = DEFAULT_THRESHOLD, policy: str = BIDIRECTIONAL):
        if policy not in SWIPE_POLICIES:
            raise ValueError(f"unknown swipe policy: {policy!r}")
        self.threshold = float(threshold)
        self.policy = policy

    def classify(self, dx: float, dy: float) -> str:
        return classify_drag(dx, dy, self.threshold, self.policy)
