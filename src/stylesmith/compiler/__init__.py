from stylesmith.compiler.compiler import combine_selector, compile_css, compile_style

__all__ = ["combine_selector", "compile_css", "compile_style"]
