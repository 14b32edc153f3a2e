from .normalize import coerce_values, normalize_points

__all__ = ["coerce_values", "normalize_points"]
