"""Digit recognition on grey-scale images using Otsu thresholding and templates."""

from __future__ import annotations

import argparse
import struct
import sys
from dataclasses import dataclass, field
from math import floor
from pathlib import Path

BACKGROUND = 0xFF
FOREGROUND = 0x00
HIST_LEN = 0x100

SYMBOL_ROWS = 9
SYMBOL_COLS = 5
DIGITS = "0123456789"

_TEMPLATES: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 0, 0,
     0, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1,
     0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 1, 0, 0, 1, 0, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 1, 1, 1,
     1, 1, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 1, 1,
     1, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 1, 0, 0,
     1, 0, 1, 1, 1, 1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0),
    (0, 1, 1, 1, 1, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 1,
     1, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 1, 0, 0, 0, 1, 0, 1, 1, 1, 1),
    (1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0,
     0, 0, 1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1,
     0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0),
    (0, 1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 1, 0, 1, 1, 1,
     1, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1,
     1, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 1, 1),
)

_NEIGHBOURS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


@dataclass
class Image:
    """A row-major image of integer pixels."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)


@dataclass
class Roi:
    """An inclusive rectangular region of interest."""

    left: int
    top: int
    right: int
    bottom: int
    fg_n: int = 0

    def width(self) -> int:
        return self.right - self.left + 1

    def height(self) -> int:
        return self.bottom - self.top + 1


@dataclass
class Histogram:
    """Histogram of the low byte of every pixel."""

    total: int
    sum: float
    data: list[int]


def _full_roi(image: Image) -> Roi:
    return Roi(0, 0, image.width - 1, image.height - 1)


def _parse_pixel(token: str) -> int:
    if not token.startswith("0x"):
        raise ValueError(f"bad pixel value {token!r}")
    digits = token[2:4]
    try:
        return int(digits, 16)
    except ValueError:
        raise ValueError(f"bad pixel value {token!r}") from None


def parse_image(text: str) -> Image:
    """Parse an image: a "width height" line then hexadecimal pixels."""
    header, _, body = text.partition("\n")
    parts = header.split()
    try:
        width, height = int(parts[0]), int(parts[1])
    except (IndexError, ValueError):
        raise ValueError(f"bad image header {header!r}") from None
    pixels = [_parse_pixel(token) for token in body.split()]
    if len(pixels) != width * height:
        raise ValueError(
            f"expected {width * height} pixels, found {len(pixels)}"
        )
    return Image(width, height, pixels)


def read_image(path: str | Path) -> Image:
    """Read an image file in the format accepted by parse_image."""
    return parse_image(Path(path).read_text())


def histogram(image: Image) -> Histogram:
    """Build the intensity histogram of an image."""
    data = [0] * HIST_LEN
    total_sum = 0.0
    for value in image.pixels:
        v = value & 0xFF
        total_sum += v
        data[v] += 1
    return Histogram(image.width * image.height, total_sum, data)


def otsu_threshold(hist: Histogram) -> int:
    """Return the threshold maximising between-class variance."""
    sum_b = 0.0
    weight_b = 0
    var_max = 0.0
    threshold = 0
    for t, count in enumerate(hist.data):
        weight_b += count
        if weight_b == 0:
            continue
        weight_f = hist.total - weight_b
        if weight_f == 0:
            break
        sum_b += float(t * count)
        mean_b = sum_b / weight_b
        mean_f = (hist.sum - sum_b) / weight_f
        var_between = float(weight_b) * float(weight_f) * (mean_b - mean_f) ** 2
        if var_between > var_max:
            var_max = var_between
            threshold = t
    return threshold


def threshold_filter(image: Image, threshold: int) -> Roi:
    """Binarise the image in place and return the padded foreground region."""
    min_x, min_y = image.width, image.height
    max_x = max_y = 0
    fg_n = 0
    pixels = image.pixels
    for r in range(image.height):
        found = False
        base = r * image.width
        for c in range(image.width):
            i = base + c
            if pixels[i] > threshold:
                pixels[i] = BACKGROUND
                continue
            min_x = min(min_x, c)
            max_x = max(max_x, c)
            found = True
            pixels[i] = FOREGROUND
            fg_n += 1
        if found:
            min_y = min(min_y, r)
            max_y = max(max_y, r)

    return Roi(
        left=min_x - 2 if min_x >= 2 else min_x,
        top=min_y - 2 if min_y >= 2 else min_y,
        right=max_x + 2 if max_x + 2 < image.width else image.width - 1,
        bottom=max_y + 2 if max_y + 2 < image.height else image.height - 1,
        fg_n=fg_n,
    )


def _flood_fill(image: Image, label: int, row: int, col: int) -> None:
    pixels = image.pixels
    width, height = image.width, image.height
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < height and 0 <= c < width):
            continue
        i = r * width + c
        if pixels[i] != FOREGROUND:
            continue
        pixels[i] = label
        stack.extend((r + dr, c + dc) for dr, dc in _NEIGHBOURS)


def label_connected_components(image: Image, roi: Roi) -> int:
    """Label 8-connected foreground components in place, scanning by column.

    Labels start at 1; the number of components is returned.
    """
    label = 1
    for c in range(roi.left, roi.right + 1):
        for r in range(roi.top, roi.bottom + 1):
            if image.pixels[r * image.width + c] != FOREGROUND:
                continue
            _flood_fill(image, label, r, c)
            label += 1
    return label - 1


def roi_from_label(image: Image, roi: Roi, label: int) -> Roi:
    """Return the bounding box of pixels carrying the given label."""
    sym = Roi(
        left=roi.right, top=roi.bottom, right=roi.left, bottom=roi.top, fg_n=0
    )
    for r in range(roi.top, roi.bottom + 1):
        found = False
        base = r * image.width
        for c in range(roi.left, roi.right + 1):
            if image.pixels[base + c] != label:
                continue
            sym.fg_n += 1
            found = True
            sym.left = min(sym.left, c)
            sym.right = max(sym.right, c)
        if found:
            sym.top = min(sym.top, r)
            sym.bottom = max(sym.bottom, r)
    return sym


def scale_image(image: Image, width: int, height: int, template: bool) -> Image:
    """Nearest-neighbour resize; template pixels 0/1 become background/foreground."""
    result = Image(width, height, [0] * (width * height))
    scale_c = width / image.width
    scale_r = height / image.height
    for r in range(height):
        nearest_r = floor(r / scale_r)
        if nearest_r >= image.height:
            continue
        for c in range(width):
            nearest_c = floor(c / scale_c)
            if nearest_c >= image.width:
                nearest_c -= 1
            pixel = image.pixels[nearest_r * image.width + nearest_c]
            if template:
                pixel = BACKGROUND if pixel == 0 else FOREGROUND
            result.pixels[r * width + c] = pixel
    return result


def compare_regions(img1: Image, roi1: Roi, img2: Image, roi2: Roi) -> int:
    """Score how alike two equally sized regions are.

    Matching background pixels score 1, matching foreground pixels score 2.
    """
    if roi1.width() != roi2.width() or roi1.height() != roi2.height():
        raise ValueError("regions must have the same size")
    score = 0
    for r in range(roi1.height()):
        start1 = (roi1.top + r) * img1.width + roi1.left
        start2 = (roi2.top + r) * img2.width + roi2.left
        row1 = img1.pixels[start1:start1 + roi1.width()]
        row2 = img2.pixels[start2:start2 + roi2.width()]
        for a, b in zip(row1, row2):
            p1 = 0 if a == BACKGROUND else 1
            p2 = 0 if b == BACKGROUND else 1
            if p1 == p2:
                score += 1 + p1
    return score


def _scaled_template(digit: int, width: int, height: int) -> Image:
    template = Image(SYMBOL_COLS, SYMBOL_ROWS, list(_TEMPLATES[digit]))
    return scale_image(template, width, height, True)


def recognize_digit(image: Image, roi: Roi) -> str:
    """Return the digit whose template best matches the region."""
    best_score = 0
    best_digit = 0
    for digit in range(len(_TEMPLATES)):
        scaled = _scaled_template(digit, roi.width(), roi.height())
        score = compare_regions(scaled, _full_roi(scaled), image, roi)
        if score > best_score:
            best_score = score
            best_digit = digit
    return DIGITS[best_digit]


def ocr(image: Image) -> str:
    """Recognise the digits in an image, left to right."""
    work = Image(image.width, image.height, list(image.pixels))
    hist = histogram(work)
    text_roi = threshold_filter(work, otsu_threshold(hist))
    count = label_connected_components(work, text_roi)
    return "".join(
        recognize_digit(work, roi_from_label(work, text_roi, label))
        for label in range(1, count + 1)
    )


def to_bmp(image: Image, roi: Roi) -> bytes:
    """Encode a region of the image as an 8-bit grey-scale BMP file."""
    width, height = roi.width(), roi.height()
    bpp = 8
    row_width = ((width * bpp + 31) & ~31) // 8
    size_img = row_width * height
    colors_used = 1 << bpp
    info_size = 40
    file_hdr_size = 14
    offset = file_hdr_size + info_size + colors_used * 4
    file_size = offset + size_img

    parts = [
        struct.pack("<2sIII", b"BM", file_size, 0, offset),
        struct.pack(
            "<IIIHHIIIIII",
            info_size, width, height, 1, bpp, 0, size_img, 0, 0, colors_used, 0,
        ),
        b"".join(bytes((cu, cu, cu, 0)) for cu in range(colors_used)),
    ]
    padding = bytes(row_width - width)
    for r in range(height):
        rr = roi.bottom - r
        start = rr * image.width + roi.left
        row = image.pixels[start:start + width]
        parts.append(bytes(v & 0xFF for v in row))
        parts.append(padding)
    return b"".join(parts)


def save_bmp(image: Image, roi: Roi, path: str | Path) -> None:
    """Write a region of the image to a BMP file."""
    Path(path).write_bytes(to_bmp(image, roi))


def _first_difference(expected: str, actual: str) -> int:
    if expected == actual:
        return -1
    for i, (a, b) in enumerate(zip(expected, actual)):
        if a != b:
            return i
    return min(len(expected), len(actual))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Recognise digits in image files.")
    parser.add_argument(
        "images",
        nargs="+",
        help="image file, optionally as PATH=EXPECTED to compare the result",
    )
    args = parser.parse_args(argv)

    status = 0
    for spec in args.images:
        path, sep, expected = spec.rpartition("=")
        if not sep:
            path, expected = spec, None
        try:
            image = read_image(path)
        except (OSError, ValueError) as exc:
            print(f"{path}: {exc}", file=sys.stderr)
            status = 1
            continue
        result = ocr(image)
        if expected is None:
            print(f"{path}: {result}")
        else:
            diff = _first_difference(expected, result)
            print(f"exp: {expected}\nact: {result}\n{diff}")
    return status


if __name__ == "__main__":
    sys.exit(main())