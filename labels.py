"""Text labels for the Wortkarte UI."""

# ---------------------------------------------------------------------------
# Main / generic UI
# ---------------------------------------------------------------------------

app_title = "Wortkarte"
loading_text = "Loading words..."

# ---------------------------------------------------------------------------
# Card hints (accessibility descriptions for the chevrons)
# ---------------------------------------------------------------------------

hint_reveal = "Swipe up to reveal translation"
hint_hide = "Swipe down to hide translation"

# ---------------------------------------------------------------------------
# Clock text
# ---------------------------------------------------------------------------

time_format = "%H:%M"
