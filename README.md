# sortviz

An interactive terminal program that shows sorting algorithms at work. You pick a kind of data, fill a doubly linked list with it (randomly or by hand), choose an algorithm, and watch the list being redrawn after every swap.

## Installing

```
pip install .
```

## Running

```
sortviz
```

Option:

- `--delay SECONDS`: how long to wait after drawing each step of a sort (default `0.5`).

The program asks, in order:

1. **Data type**: `C` for characters, `I` for integers, or `A` for bars of asterisks. Lower-case answers are accepted.
2. **How to fill the list**: `R` or `M`, in either case.
   - `R` asks for a size (a whole number above 0, or `;` for none) and generates that many random items: upper-case letters, integers from 0 to 32767, or asterisk bars from 1 up to the size in length.
   - `M` lets you type items one at a time until you enter `;`. Characters must be a single letter, space or `*` (letters are upper-cased); integers must be whole numbers above 0; bars must be made only of `*`.
3. After the list is printed and you press Enter, the **algorithm**:
   - `1` bubble sort
   - `2` cocktail sort
   - `3` selection sort
   - `4` insertion sort

   or `;` to leave the list unsorted.

Each step of a sort clears the screen and prints the list, with every item's original insertion position beside it. Characters compare by letter code, integers by value, and asterisk bars by length. The final list is printed at the end, followed by another Enter prompt.

If input ends or the program is interrupted, it stops and exits with status 1.

The output is coloured and the screen is cleared with ANSI escape sequences, so run it in a terminal that understands them. There is no graphical display.

## Using it from Python

The modules can be used on their own:

- `sortviz.dlist`: `DataType` (`CHAR`, `INTEGER`, `ASTERISK`) and `DoublyList`, with `append`, `find`, `remove`, `swap` (relinks two nodes), `values`, `render` and `print`.
- `sortviz.algorithms`: `bubble_sort`, `cocktail_sort`, `selection_sort` and `insert_sort`, which sort a `DoublyList` in place. If a `Visualizer` is given, they draw a frame after each swap. `greater_than`, `less_than` and `equal` are the comparisons they use.
- `sortviz.generate`: `generate_items(data_type, size, dlist, rng)` fills a list with random data. Pass a `random.Random` to make the result repeatable.
- `sortviz.prompts`: the line readers used by the prompts.
- `sortviz.ansi`: escape-sequence constants and helpers such as `move_cursor`, `text_rgb` and `cursor_up`.
- `sortviz.cli.run(stream, out, delay)`: runs the whole interactive session against any input and output streams and returns the final list.

```python
import io
from sortviz.dlist import DataType, DoublyList
from sortviz.algorithms import Visualizer, bubble_sort

items = DoublyList(DataType.INTEGER)
for value in (5, 3, 9, 1):
    items.append(value)

bubble_sort(items, Visualizer(io.StringIO(), 0))
print(items.values())  # [1, 3, 5, 9]
```

## Running the tests

```
pip install ".[test]"
pytest
```