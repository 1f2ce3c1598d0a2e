from .output import render_help, render_path_list

__all__ = ["render_help", "render_path_list"]
