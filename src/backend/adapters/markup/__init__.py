from .markup import load_html, parse_inline_style, tree_from_html

__all__ = ["load_html", "parse_inline_style", "tree_from_html"]
