"""Entry point for the Wortkarte flashcard app (Kivy)."""

from wortkarte.app import WortkarteApp


if __name__ == "__main__":
    WortkarteApp().run()
