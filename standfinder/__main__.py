"""Entry point for `python -m standfinder` (Kivy frontend)."""

from standfinder.gui.app import run_app

if __name__ == "__main__":
    run_app()
