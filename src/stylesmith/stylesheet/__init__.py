from stylesmith.stylesheet.model import CssRule, Declaration, Stylesheet

__all__ = ["CssRule", "Declaration", "Stylesheet"]
