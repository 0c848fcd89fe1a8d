from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import sys

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from rasterplot.raster.canvas import RGBA, blend_coverage


DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 12.0
# Tried in order after the requested family.
FALLBACK_FAMILIES = ("DejaVu Sans", "Liberation Sans", "Helvetica", "Arial")
FONT_SUFFIXES = {".ttf", ".otf", ".ttc"}

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


@dataclass(frozen=True)
class TextMask:
    """8-bit ink coverage of a rendered string, cropped to its ink box."""

    alpha: np.ndarray

    @property
    def size(self) -> tuple[int, int]:
        h, w = self.alpha.shape
        return (w, h)

    def rotated(self, quarter_turns: int) -> TextMask:
        if quarter_turns == 0:
            return self
        return TextMask(np.ascontiguousarray(np.rot90(self.alpha, k=quarter_turns)))


def draw_text(
    dst: np.ndarray,
    x: int,
    y: int,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    rotate_deg: int = 0,
) -> None:
    """Blend ``text`` so the top-left corner of its ink box lands on (x, y).

    ``rotate_deg`` must be a multiple of 90; positive values turn the text
    counter-clockwise, so 90 reads bottom-to-top.
    """
    turns = quarter_turns(rotate_deg)
    if not text:
        return
    mask = _text_mask(text, _font(font_family, _pixel_size(font_size_px))).rotated(turns)
    blend_coverage(dst, x, y, mask.alpha.astype(np.float32) / 255.0, color)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    rotate_deg: int = 0,
) -> tuple[int, int]:
    turns = quarter_turns(rotate_deg)
    font = _font(font_family, _pixel_size(font_size_px))
    if not text:
        ascent, descent = font.getmetrics()
        return (0, max(1, int(ascent + descent)))
    w, h = _ink_box_size(font, text)
    return (h, w) if turns % 2 else (w, h)


def quarter_turns(rotate_deg: int) -> int:
    if rotate_deg % 90:
        raise ValueError(f"rotate_deg must be a multiple of 90, got {rotate_deg}")
    return (rotate_deg // 90) % 4


def _pixel_size(font_size_px: float) -> int:
    return max(1, int(round(font_size_px)))


def _ink_box_size(font: Font, text: str) -> tuple[int, int]:
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


@lru_cache(maxsize=256)
def _text_mask(text: str, font: Font) -> TextMask:
    left, top, _, _ = font.getbbox(text)
    w, h = _ink_box_size(font, text)
    image = Image.new("L", (max(1, w), h), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return TextMask(np.asarray(image, dtype=np.uint8))


@lru_cache(maxsize=64)
def _font(font_family: str, size: int) -> Font:
    path = find_font_file(font_family)
    if path is not None:
        try:
            return ImageFont.truetype(str(path), size=size)
        except OSError:
            pass
    return ImageFont.load_default(size=size)


def _font_dirs() -> list[Path]:
    if sys.platform == "darwin":
        return [
            Path.home() / "Library" / "Fonts",
            Path("/Library/Fonts"),
            Path("/System/Library/Fonts"),
            Path("/System/Library/Fonts/Supplemental"),
        ]
    if sys.platform.startswith("win"):
        return [Path("C:/Windows/Fonts")]
    return [Path.home() / ".fonts", Path("/usr/share/fonts"), Path("/usr/local/share/fonts")]


@lru_cache(maxsize=1)
def _installed_fonts() -> tuple[Path, ...]:
    found: list[Path] = []
    for root in _font_dirs():
        if root.is_dir():
            found.extend(sorted(p for p in root.rglob("*") if p.suffix.lower() in FONT_SUFFIXES))
    return tuple(found)


def _family_key(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch.isalnum())


@lru_cache(maxsize=16)
def find_font_file(font_family: str) -> Path | None:
    """Locate an installed font file for ``font_family``.

    A file whose stem equals the family (ignoring case, spaces and dashes)
    wins over one that merely contains it, so "DejaVu Sans" resolves to
    DejaVuSans.ttf rather than DejaVuSans-Bold.ttf.
    """
    fonts = _installed_fonts()
    wanted = [font_family.strip() or DEFAULT_FONT_FAMILY, *FALLBACK_FAMILIES]
    for family in wanted:
        key = _family_key(family)
        exact = [p for p in fonts if _family_key(p.stem) == key]
        if exact:
            return exact[0]
        partial = [p for p in fonts if key in _family_key(p.stem)]
        if partial:
            return partial[0]
    return None
