from .loader import encode_png, load_image

__all__ = ["load_image", "encode_png"]
