"""
Image output: the sinks a finished render is handed to.

- Plain-text PPM (P3), writable to any text stream including stdout
- Anything Pillow can write (PNG, JPEG, BMP, ...), chosen by extension
"""

from __future__ import annotations
from pathlib import Path
from typing import TextIO, Union
import numpy as np

from .renderer import to_ldr


def _as_ldr(image: np.ndarray) -> np.ndarray:
    if image.dtype == np.float64 or image.dtype == np.float32:
        return to_ldr(image)
    return image


def write_ppm(image: np.ndarray, stream: TextIO) -> None:
    """Write an image as plain-text PPM.

    Args:
        image: Image of shape (height, width, 3), float (linear) or uint8
        stream: Text stream to write to
    """
    image = _as_ldr(image)
    height, width = image.shape[:2]

    stream.write(f"P3\n{width} {height}\n255\n")
    for row in image:
        stream.writelines(f"{r} {g} {b}\n" for r, g, b in row)


def is_supported_output(filename: Union[str, Path]) -> bool:
    """Whether save_image can write a file with this name's extension."""
    from PIL import Image as PILImage

    suffix = Path(filename).suffix.lower()
    return suffix == '.ppm' or suffix in PILImage.registered_extensions()


def save_image(image: np.ndarray, filename: Union[str, Path]) -> None:
    """Save image to file.

    Args:
        image: Image array (linear float or uint8)
        filename: Output filename (extension determines format)
    """
    from PIL import Image as PILImage

    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() == '.ppm':
        with open(path, 'w') as f:
            write_ppm(image, f)
        return

    pil_image = PILImage.fromarray(_as_ldr(image))
    pil_image.save(path)
