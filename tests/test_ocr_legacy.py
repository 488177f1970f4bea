import pytest

from katas.ocr import BACKGROUND, FOREGROUND, Histogram, Image, Roi, histogram, scale_image
from katas.ocr_legacy import (
    HISTOGRAM_HEIGHT,
    apply_convolution,
    blur,
    erode_symbol,
    gaussian_kernel,
    histogram_image,
    histogram_sigma,
    matrix_from_roi,
    morphological_fit,
)


def _full(image):
    return Roi(0, 0, image.width - 1, image.height - 1)


def test_identity_kernel_leaves_image_unchanged():
    pixels = [10, 20, 30, 40, 50, 60]
    image = Image(3, 2, list(pixels))
    apply_convolution(image, [[1.0]])
    assert image.pixels == pixels


def test_convolution_clamps_to_byte_range():
    image = Image(2, 1, [200, 10])
    apply_convolution(image, [[-1.0]])
    assert image.pixels == [0, 0]
    image = Image(2, 1, [200, 120])
    apply_convolution(image, [[3.0]])
    assert image.pixels == [255, 255]


def test_box_kernel_keeps_constant_image():
    image = Image(4, 3, [100] * 12)
    apply_convolution(image, [[0.25, 0.25], [0.25, 0.25]])
    assert image.pixels == [100] * 12


def test_gaussian_kernel_is_normalised_and_symmetric():
    kernel = gaussian_kernel(1.5, 5)
    assert sum(sum(row) for row in kernel) == pytest.approx(1.0)
    assert kernel[2][2] == max(max(row) for row in kernel)
    for r in range(5):
        for c in range(5):
            assert kernel[r][c] == pytest.approx(kernel[4 - r][4 - c])
            assert kernel[r][c] == pytest.approx(kernel[c][r])


def test_histogram_sigma_scales_with_total():
    small = Histogram(4, 4 * 100.0, [0] * 256)
    large = Histogram(16, 16 * 100.0, [0] * 256)
    assert histogram_sigma(small) == pytest.approx(2 * histogram_sigma(large))


def test_blur_keeps_constant_image_close():
    image = Image(6, 6, [120] * 36)
    blur(image, histogram(image))
    assert all(119 <= value <= 120 for value in image.pixels)


def _square_image(size, inner, label=1):
    pixels = [BACKGROUND] * (size * size)
    start = (size - inner) // 2
    for r in range(start, start + inner):
        for c in range(start, start + inner):
            pixels[r * size + c] = label
    return Image(size, size, pixels)


def test_morphological_fit_erodes_border():
    image = _square_image(7, 5)
    morphological_fit(image, _full(image), [[1, 1, 1]] * 3)
    expected = _square_image(7, 3)
    assert image.pixels == expected.pixels


def test_erode_symbol_small_region_untouched():
    image = Image(5, 9, [1] * 45)
    erode_symbol(image, _full(image))
    assert image.pixels == [1] * 45


def test_erode_symbol_clears_top_row_and_left_column():
    image = Image(10, 18, [1] * 180)
    erode_symbol(image, _full(image))
    for r in range(18):
        for c in range(10):
            value = image.pixels[r * 10 + c]
            if r == 0 or c == 0:
                assert value == BACKGROUND
            else:
                assert value == 1


def test_histogram_image_bars():
    data = [0] * 256
    data[3] = 8
    data[200] = 4
    image = histogram_image(Histogram(12, 0.0, data))
    assert image.height == HISTOGRAM_HEIGHT
    assert len(image.pixels) == image.width * image.height
    column = [image.pixels[r * image.width + 3 * 4] for r in range(image.height)]
    assert column == [FOREGROUND] * HISTOGRAM_HEIGHT
    empty = [image.pixels[r * image.width + 4] for r in range(image.height)]
    assert empty == [BACKGROUND] * HISTOGRAM_HEIGHT
    half = [image.pixels[r * image.width + 200 * 4] for r in range(image.height)]
    assert half.count(FOREGROUND) == HISTOGRAM_HEIGHT // 2


def test_histogram_image_rejects_empty_histogram():
    with pytest.raises(ValueError):
        histogram_image(Histogram(0, 0.0, [0] * 256))


def test_matrix_from_uniform_regions():
    full = Image(5, 9, [FOREGROUND] * 45)
    assert matrix_from_roi(full, _full(full)) == [[1] * 5 for _ in range(9)]
    blank = Image(5, 9, [BACKGROUND] * 45)
    assert matrix_from_roi(blank, _full(blank)) == [[0] * 5 for _ in range(9)]


def test_matrix_from_scaled_pattern_round_trip():
    pattern = [[(r + c) % 2 for c in range(5)] for r in range(9)]
    flat = [v for row in pattern for v in row]
    scaled = scale_image(Image(5, 9, flat), 10, 18, True)
    assert matrix_from_roi(scaled, _full(scaled)) == pattern