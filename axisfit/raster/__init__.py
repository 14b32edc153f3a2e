from .canvas import blend, draw_hline, draw_vline, fill_rect, new_canvas
from .context import RasterContext
from .draw_lines import draw_line
from .draw_markers import fill_disc
from .draw_text import draw_text, load_font, text_size

__all__ = [
    "RasterContext",
    "blend",
    "draw_hline",
    "draw_line",
    "draw_text",
    "draw_vline",
    "fill_disc",
    "fill_rect",
    "load_font",
    "new_canvas",
    "text_size",
]
