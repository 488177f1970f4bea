# katas

A collection of small, self-contained solutions to well-known programming
puzzles, each in its own module under the `katas` package. Nothing outside
the standard library is needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `katas.ocr` | Recognises a row of digits in a grey-scale image: Otsu thresholding, 8-connected component labelling and template matching against 5×9 digit glyphs. Can also encode a region of an image as an 8-bit BMP (`to_bmp`, `save_bmp`). |
| `katas.ocr_legacy` | Earlier image helpers: convolution, Gaussian blur, morphological erosion, a bar-chart image of a histogram, and reducing a symbol to a 9×5 grid of 0/1 cells. |
| `katas.voronoi` | `Point` and `Line` helpers and the area of each site's Voronoi cell (`-1.0` for unbounded cells). |
| `katas.skyscrapers` | Solver for the 7×7 skyscrapers puzzle from 28 clues; raises `ValueError` when there is no solution. |
| `katas.palindrome` | The n-th non-negative palindromic number (`find_reverse_number(1) == 0`). |
| `katas.roman` | Roman numeral conversion in both directions (0–3999). |
| `katas.snail` | Clockwise "snail" traversal of a matrix. |
| `katas.spiral` | Builds an n×n spiral of ones in a grid of zeros (n ≥ 5) and formats it as text. |
| `katas.regexp` | Converts a regular expression to postfix tokens and builds a Thompson NFA from them. |
| `katas.parse_int` | Turns English number words ("seven hundred eighty-three thousand") into integers; unknown words such as "and" are skipped. |
| `katas.search_string` | Counts occurrences of a substring with an Aho–Corasick automaton, with or without overlaps. |
| `katas.ring_queue` | `RingQueue`, a FIFO queue whose capacity starts at a power of two and doubles whenever it fills. |
| `katas.sourcemappings` | Decodes a compressed `s:l:f:j:m;…` source-mapping string into `Node` objects, filling empty fields from the previous node. |
| `katas.spinning_rings` | Number of moves until two counter-rotating rings show the same number. |
| `katas.trench_assault` | Letter weights for the trench-assault kata, computed with a bit trick (`weight`) and by table lookup (`weight_slow`), with a timing harness. |
| `katas.triangle` | Reduces a row of `R`, `G`, `B` colours to the single colour at the bottom of the triangle. |

## Examples

```python
from katas.roman import from_roman, to_roman
from katas.triangle import triangle
from katas.snail import snail
from katas.search_string import search_substr
from katas.ring_queue import RingQueue

to_roman(1990)          # 'MCMXC'
from_roman("MMVIII")    # 2008

triangle("RRGBRGBB")    # 'G'

snail([[1, 2, 3],
       [4, 5, 6],
       [7, 8, 9]])      # [1, 2, 3, 6, 9, 8, 7, 4, 5]

search_substr("aaabbbcccc", "cc", True)    # 3
search_substr("aaabbbcccc", "cc", False)   # 2

queue = RingQueue()
queue.push("a")
queue.push("b")
queue.pop()             # 'a'
```

Digit recognition works on an `Image`, which `read_image` loads from a text
file whose first line holds the width and height and whose remaining tokens
are hexadecimal pixel values such as `0xff`. `parse_image` does the same
from a string. `ocr` works on a copy and leaves the given image unchanged.

```python
from katas.ocr import ocr, read_image

image = read_image("digits.txt")
print(ocr(image))
```

## Commands

```
katas-ocr FILE...
katas-ocr FILE=EXPECTED...
```

Reads each image file and prints the digits recognised in it. With
`FILE=EXPECTED`, prints the expected and the recognised digits and the index
of the first difference (`-1` when they agree). Exits with status 1 if any
file cannot be read.

```
katas-trench-assault [--iterations N]
```

Times `weight_slow` and `weight` over a sample string, `N` passes each
(10,000,000 by default), and prints the CPU time each took.

## What it does not do

- `katas.regexp` only builds the NFA; there is no function that runs it
  against a string.
- `katas.ocr` does not correct rotated digits, and it does not display images;
  write a region out with `save_bmp` to look at it.