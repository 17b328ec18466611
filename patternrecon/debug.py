"""
Heatmap Debug Utilities

Functions for saving annotated keypad images of an analyzed tap session.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .keypad import KEY_CENTERS
from .types import NormalizedTap, PinCandidate, TapAnalysis


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Top-digit probability thresholds for coloring
HIGH_PROBABILITY = 0.25
MEDIUM_PROBABILITY = 0.15

DEFAULT_IMAGE_SIZE = (300, 400)
KEY_RADIUS = 30
TAP_RADIUS = 6


def get_probability_color(probability: float) -> str:
    """
    Get color name for a tap's top-digit probability.

    Args:
        probability: Probability 0.0-1.0

    Returns:
        PIL color name
    """
    if probability >= HIGH_PROBABILITY:
        return "green"
    elif probability >= MEDIUM_PROBABILITY:
        return "orange"
    else:
        return "red"


def _load_fonts():
    """Load label fonts, falling back to PIL's default bitmap font."""
    try:
        font = ImageFont.truetype("arial.ttf", 16)
        small_font = ImageFont.truetype("arial.ttf", 11)
    except OSError:
        font = ImageFont.load_default()
        small_font = font
    return font, small_font


def render_heatmap_image(
    normalized: Sequence[NormalizedTap],
    analyses: Sequence[TapAnalysis],
    top_candidates: Optional[Sequence[PinCandidate]] = None,
    size: Tuple[int, int] = DEFAULT_IMAGE_SIZE
) -> Image.Image:
    """
    Draw the keypad with the session's taps on top.

    Annotations include:
    - Key circles with digit labels
    - Tap markers numbered in tap order, colored by top-digit probability
    - Each tap's most likely digit
    - The best candidates, if given

    Args:
        normalized: Taps in keypad space
        analyses: Digit distributions for the same taps
        top_candidates: Optional ranked candidates for the caption
        size: Image (width, height) in pixels

    Returns:
        RGB PIL Image
    """
    width, height = size
    image = Image.new("RGB", size, "white")
    draw = ImageDraw.Draw(image)
    font, small_font = _load_fonts()

    for digit, center in KEY_CENTERS.items():
        cx, cy = center.x * width, center.y * height
        draw.ellipse([cx - KEY_RADIUS, cy - KEY_RADIUS, cx + KEY_RADIUS, cy + KEY_RADIUS],
                     outline="gray", width=2)
        draw.text((cx - 4, cy - 8), str(digit), fill="gray", font=font)

    for tap, analysis in zip(normalized, analyses):
        tx, ty = tap.x * width, tap.y * height
        top = analysis.probabilities[0]
        color = get_probability_color(top.p)
        draw.ellipse([tx - TAP_RADIUS, ty - TAP_RADIUS, tx + TAP_RADIUS, ty + TAP_RADIUS],
                     fill=color)
        label = f"{analysis.position + 1}:{top.digit} {top.p * 100:.0f}%"
        draw.text((tx + TAP_RADIUS + 2, ty - TAP_RADIUS), label, fill=color, font=small_font)

    # Connect taps in order
    if len(normalized) > 1:
        points = [(tap.x * width, tap.y * height) for tap in normalized]
        draw.line(points, fill="blue", width=1)

    if top_candidates:
        summary = "Top: " + ", ".join(c.pin for c in top_candidates[:3])
        draw.text((5, 5), summary, fill="blue", font=small_font)

    return image


def save_heatmap_image(
    normalized: Sequence[NormalizedTap],
    analyses: Sequence[TapAnalysis],
    top_candidates: Optional[Sequence[PinCandidate]] = None,
    path: Optional[Union[str, Path]] = None,
    size: Tuple[int, int] = DEFAULT_IMAGE_SIZE
) -> Path:
    """
    Save an annotated heatmap image.

    Args:
        normalized: Taps in keypad space
        analyses: Digit distributions for the same taps
        top_candidates: Optional ranked candidates for the caption
        path: Output file; defaults to a timestamped file in DEBUG_DIR,
            which keeps only the newest MAX_DEBUG_IMAGES images
        size: Image (width, height) in pixels

    Returns:
        Path of the written PNG
    """
    if path is None:
        DEBUG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        path = DEBUG_DIR / f"heatmap_{timestamp}.png"
        rotate = True
    else:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        rotate = False

    image = render_heatmap_image(normalized, analyses, top_candidates, size)
    image.save(path, "PNG")

    if rotate:
        _cleanup_debug_images()

    return path


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    # Get all debug images sorted by modification time
    debug_files = sorted(
        DEBUG_DIR.glob("heatmap_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    # Remove old files
    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError:
            pass
