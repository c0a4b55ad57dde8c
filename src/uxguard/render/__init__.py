from uxguard.render.screen import ScreenModel, ScreenPrinter, build_screen, render_screen

__all__ = ["ScreenModel", "ScreenPrinter", "build_screen", "render_screen"]
