from __future__ import annotations

from io import BytesIO
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from rasterplot.errors import PlotExportError

LOGGER = logging.getLogger(__name__)


def encode_png(frame_rgba: np.ndarray) -> bytes:
    if frame_rgba.dtype != np.uint8:
        raise PlotExportError("frame_rgba must be uint8")
    if frame_rgba.ndim != 3 or frame_rgba.shape[2] != 4:
        raise PlotExportError("frame_rgba must have shape (H, W, 4)")
    if frame_rgba.shape[0] == 0 or frame_rgba.shape[1] == 0:
        raise PlotExportError("frame_rgba must not be empty")
    image = Image.fromarray(np.ascontiguousarray(frame_rgba))
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    data = buffer.getvalue()
    if not data:
        raise PlotExportError("png encoder produced no data")
    return data


def write_bytes(data: bytes, path: str | Path) -> bool:
    """Single synchronous write; a failed write may leave a partial file behind."""
    out_path = Path(path)
    try:
        with out_path.open("wb") as f:
            f.write(data)
    except OSError as exc:
        LOGGER.warning("could not write %s: %s", out_path, exc)
        return False
    LOGGER.debug("wrote %d bytes to %s", len(data), out_path)
    return True


def save_png(frame_rgba: np.ndarray, path: str | Path) -> bool:
    try:
        data = encode_png(frame_rgba)
    except PlotExportError as exc:
        LOGGER.warning("png encoding failed: %s", exc)
        return False
    return write_bytes(data, path)
