"""Color contrast evaluation for text-bearing elements (WCAG 2.x 1.4.3).

Luminance and ratio follow the WCAG definition. The effective background
is found by walking up the ancestor chain; one translucent layer is
composited over the next resolved layer beneath it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel

from .dom import DomNode

_RGB_FUNC = re.compile(
    r"^rgba?\(\s*(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)\s*(?:,\s*(\d*\.?\d+)\s*)?\)$",
    re.IGNORECASE,
)
_HEX = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_LEADING_NUMBER = re.compile(r"\d+")

NORMAL_TEXT_MIN_RATIO = 4.5
LARGE_TEXT_MIN_RATIO = 3.0
LARGE_TEXT_PX = 24
LARGE_BOLD_TEXT_PX = 19


@dataclass(frozen=True)
class ColorSample:
    r: float
    g: float
    b: float
    alpha: float = 1.0

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1

    @property
    def is_transparent(self) -> bool:
        return self.alpha <= 0

    def to_hex(self) -> str:
        return "#" + "".join(f"{int(round(c)):02x}" for c in (self.r, self.g, self.b))


def parse_color(value: Optional[str]) -> Optional[ColorSample]:
    """Parse rgb()/rgba()/#hex/transparent; anything else is unresolvable."""
    if not value:
        return None
    raw = value.strip()
    if raw.lower() == "transparent":
        return ColorSample(0, 0, 0, 0.0)

    match = _RGB_FUNC.match(raw)
    if match:
        r, g, b, alpha = match.groups()
        return ColorSample(float(r), float(g), float(b), 1.0 if alpha is None else float(alpha))

    match = _HEX.match(raw)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return ColorSample(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))
    return None


def _linearize(channel: float) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorSample) -> float:
    return 0.2126 * _linearize(color.r) + 0.7152 * _linearize(color.g) + 0.0722 * _linearize(color.b)


def contrast_ratio(first: float, second: float) -> float:
    lighter, darker = max(first, second), min(first, second)
    return (lighter + 0.05) / (darker + 0.05)


def composite(source: ColorSample, dest: ColorSample) -> ColorSample:
    def _mix(src: float, dst: float) -> float:
        return src * source.alpha + (1 - source.alpha) * dst

    return ColorSample(_mix(source.r, dest.r), _mix(source.g, dest.g), _mix(source.b, dest.b))


def resolve_background(node: Optional[DomNode]) -> Optional[ColorSample]:
    """
    Effective background color behind `node`, or None when it cannot be
    determined (background image, unparseable color, nothing opaque below).
    """
    source: Optional[ColorSample] = None
    current = node
    while current is not None and current.is_element and current.tag != "html":
        style = current.style
        if style is None:
            current = current.parent
            continue
        if style.background_image and style.background_image != "none":
            return None

        color = parse_color(style.background_color)
        if style.background_color and color is None:
            return None
        if color is None or color.is_transparent:
            current = current.parent
            continue

        if source is not None:
            return composite(source, color)
        if color.is_opaque:
            return color
        source = color
        current = current.parent
    return None


def _font_size_px(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    match = _LEADING_NUMBER.search(value)
    return int(match.group(0)) if match else None


def is_bold(font_weight: Optional[str], font_family: Optional[str]) -> bool:
    return font_weight == "bold" or "bold" in (font_family or "").lower()


def minimum_ratio(
    font_size_px: Optional[int],
    font_weight: Optional[str],
    font_family: Optional[str],
    *,
    normal_min_ratio: float = NORMAL_TEXT_MIN_RATIO,
    large_min_ratio: float = LARGE_TEXT_MIN_RATIO,
    large_text_px: int = LARGE_TEXT_PX,
    large_bold_text_px: int = LARGE_BOLD_TEXT_PX,
) -> float:
    if font_size_px is None or not font_weight:
        return normal_min_ratio
    threshold = large_bold_text_px if is_bold(font_weight, font_family) else large_text_px
    return large_min_ratio if font_size_px >= threshold else normal_min_ratio


class ContrastFinding(BaseModel):
    expected_ratio: float
    actual_ratio: float
    foreground: str
    background: str
    font_size_px: Optional[int] = None
    font_weight: str = "Normal"


def check_contrast(
    node: DomNode,
    *,
    normal_min_ratio: float = NORMAL_TEXT_MIN_RATIO,
    large_min_ratio: float = LARGE_TEXT_MIN_RATIO,
    large_text_px: int = LARGE_TEXT_PX,
    large_bold_text_px: int = LARGE_BOLD_TEXT_PX,
) -> Optional[ContrastFinding]:
    """Return a finding when `node` fails its minimum ratio, else None."""
    style = node.style
    if style is None or not style.color:
        return None

    foreground = parse_color(style.color)
    background = resolve_background(node)
    if foreground is None or background is None:
        return None

    ratio = contrast_ratio(relative_luminance(foreground), relative_luminance(background))
    size_px = _font_size_px(style.font_size)
    required = minimum_ratio(
        size_px,
        style.font_weight,
        style.font_family,
        normal_min_ratio=normal_min_ratio,
        large_min_ratio=large_min_ratio,
        large_text_px=large_text_px,
        large_bold_text_px=large_bold_text_px,
    )
    # Identical colors usually mean an unresolved inherited color.
    if ratio >= required or ratio == 1:
        return None

    return ContrastFinding(
        expected_ratio=required,
        actual_ratio=ratio,
        foreground=foreground.to_hex(),
        background=background.to_hex(),
        font_size_px=size_px,
        font_weight="Bold" if is_bold(style.font_weight, style.font_family) else "Normal",
    )
