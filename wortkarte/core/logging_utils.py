from kivy.logger import Logger


def log(text, level="info"):
    """Log one line through Kivy's logger under the 'Wortkarte' category."""
    emit = getattr(Logger, level, Logger.info)
    emit(f"Wortkarte: {text}")
