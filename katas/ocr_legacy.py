"""Earlier image-processing helpers for digit recognition: blur, erosion, grids."""

from __future__ import annotations

from collections.abc import Sequence
from math import exp, pi, sqrt

from katas.ocr import (
    BACKGROUND,
    FOREGROUND,
    HIST_LEN,
    SYMBOL_COLS,
    SYMBOL_ROWS,
    Histogram,
    Image,
    Roi,
)

BLUR_SIZE = 5
HISTOGRAM_BAR_WIDTH = 4
HISTOGRAM_HEIGHT = 300
FILL_RATIO = 0.7

_TWO_OVER_PI = 2.0 / pi
_CLEAR = 0

Kernel = Sequence[Sequence[float]]


def _kernel_shape(kernel: Kernel) -> tuple[int, int]:
    height = len(kernel)
    width = len(kernel[0]) if height else 0
    return height, width


def apply_convolution(image: Image, kernel: Kernel) -> None:
    """Convolve the image in place with a row-major kernel.

    Edge pixels are repeated outside the image and results are clamped
    to 0..255. Pixels already written are read by later positions.
    """
    k_height, k_width = _kernel_shape(kernel)
    row_offset = k_width // 2
    col_offset = k_height // 2
    width, height = image.width, image.height
    pixels = image.pixels
    for r in range(height):
        for c in range(width):
            total = 0.0
            for kr, kernel_row in enumerate(kernel):
                ri = min(max(r + kr - row_offset, 0), height - 1)
                for kc, weight in enumerate(kernel_row):
                    ci = min(max(c + kc - col_offset, 0), width - 1)
                    total += pixels[ri * width + ci] * weight
            pixels[r * width + c] = int(min(max(total, 0.0), 255.0))


def histogram_sigma(hist: Histogram) -> float:
    """Spread of the intensity range around the histogram's mean value."""
    mean = hist.sum / hist.total
    spread = sum((i - mean) ** 2 for i in range(HIST_LEN))
    return sqrt(spread / hist.total)


def gaussian_kernel(sigma: float, size: int) -> list[list[float]]:
    """Return a normalised size x size Gaussian kernel."""
    sigma_2 = sigma * sigma
    half = size // 2
    rows = [
        [
            (1.0 / (_TWO_OVER_PI * sigma_2))
            * exp(-((c - half) ** 2 + (r - half) ** 2) / (2.0 * sigma_2))
            for c in range(size)
        ]
        for r in range(size)
    ]
    total = sum(sum(row) for row in rows)
    return [[value / total for value in row] for row in rows]


def blur(image: Image, hist: Histogram) -> None:
    """Gaussian-blur the image in place, sigma taken from its histogram."""
    kernel = gaussian_kernel(histogram_sigma(hist), BLUR_SIZE)
    apply_convolution(image, kernel)


def morphological_fit(image: Image, roi: Roi, kernel: Kernel) -> None:
    """Erode non-background pixels in the region where the kernel does not fit."""
    k_height, k_width = _kernel_shape(kernel)
    offsets = [
        (kr - k_width // 2, kc - k_height // 2)
        for kr, kernel_row in enumerate(kernel)
        for kc, value in enumerate(kernel_row)
        if value
    ]
    width, height = image.width, image.height
    pixels = image.pixels

    def misses(r: int, c: int) -> bool:
        if not (0 <= c < width and 0 <= r < height):
            return True
        if not (roi.left <= c <= roi.right and roi.top <= r <= roi.bottom):
            return True
        return pixels[r * width + c] == BACKGROUND

    for rr in range(roi.top, roi.bottom + 1):
        for rc in range(roi.left, roi.right + 1):
            index = rr * width + rc
            if pixels[index] == BACKGROUND:
                continue
            if any(misses(rr + dr, rc + dc) for dr, dc in offsets):
                pixels[index] = _CLEAR

    for rr in range(roi.top, roi.bottom + 1):
        for rc in range(roi.left, roi.right + 1):
            index = rr * width + rc
            if pixels[index] == _CLEAR:
                pixels[index] = BACKGROUND


def erode_symbol(image: Image, roi: Roi) -> None:
    """Erode a symbol with a kernel sized to one cell of the symbol grid."""
    k_width = (roi.width() + SYMBOL_COLS - 1) // SYMBOL_COLS
    k_height = (roi.height() + SYMBOL_ROWS - 1) // SYMBOL_ROWS
    if k_width < 2 or k_height < 2:
        return
    kernel = [[1] * k_width for _ in range(k_height)]
    morphological_fit(image, roi, kernel)


def histogram_image(hist: Histogram) -> Image:
    """Render the histogram as a bar chart image."""
    peak = max(hist.data)
    if peak == 0:
        raise ValueError("histogram is empty")
    bars = [int(count / peak * HISTOGRAM_HEIGHT) for count in hist.data]
    width = HIST_LEN * HISTOGRAM_BAR_WIDTH
    pixels: list[int] = []
    for r in range(HISTOGRAM_HEIGHT):
        for bar in bars:
            colour = FOREGROUND if r < bar else BACKGROUND
            pixels.extend([colour] * HISTOGRAM_BAR_WIDTH)
    return Image(width, HISTOGRAM_HEIGHT, pixels)


def matrix_from_roi(image: Image, roi: Roi) -> list[list[int]]:
    """Reduce a region to a 9x5 grid of 0/1 cells by foreground coverage."""
    row_step = roi.height() / SYMBOL_ROWS
    col_step = roi.width() / SYMBOL_COLS
    matrix: list[list[int]] = []
    for r in range(SYMBOL_ROWS):
        rr_start, rr_end = int(r * row_step), int((r + 1) * row_step)
        cells: list[int] = []
        for c in range(SYMBOL_COLS):
            cc_start, cc_end = int(c * col_step), int((c + 1) * col_step)
            area = (rr_end - rr_start) * (cc_end - cc_start)
            filled = sum(
                1
                for rr in range(rr_start, rr_end)
                for cc in range(cc_start, cc_end)
                if image.pixels[(roi.top + rr) * image.width + roi.left + cc] != 0xFF
            )
            cells.append(1 if area and filled / area >= FILL_RATIO else 0)
        matrix.append(cells)
    return matrix