# sortconst

In-place sorting of mutable sequences with two small, predictable algorithms,
both found in `sortconst.sorting`:

- `quicksort`: an iterative quicksort that keeps its pending ranges on a
  stack of bounded size, so its memory use has a fixed ceiling.
- `shellsort`: a shellsort over a gap sequence you can choose. By default it
  uses `A366726`, a sequence that begins 1, 4, 9, 20, 45, 102, …

## Installation

```
pip install sortconst
```

## Usage

Both functions sort any sequence that supports item assignment in place
(lists, bytearrays, writable memoryview slices) and return that same object.
Any other sequence, such as a tuple, is first copied into a new list. That
list is sorted and returned, and the original is left as it was.

```python
from sortconst.sorting import quicksort, shellsort

data = [1, 2, 3, 6, 5, 4, 7, 8, 9, 0]
quicksort(data)
assert data == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]

assert shellsort((3, 1, 2)) == [1, 2, 3]
```

### Custom ordering

Pass `less`, a function of two elements. It returns `True` when its first
argument should come before its second. When `less` is left out, elements are
compared with `<`, so the smallest comes first.

```python
descending = quicksort([1, 2, 4, 3], less=lambda a, b: a > b)
assert descending == [4, 3, 2, 1]
```

Neither sort is stable: elements that compare equal can end up in any order.

### Bounded stack depth

`quicksort` accepts `depth`, the largest number of pending ranges it may hold
at once. The default is 1024. If sorting needs more than that,
`CapacityError` (a subclass of `RuntimeError`) is raised. Larger inputs with
unlucky layouts need a larger `depth`. When the error is raised, the data may
already be partly rearranged.

```python
from sortconst.sorting import CapacityError, quicksort

data = [i if i % 2 == 0 else 0 for i in range(1000)]
try:
    quicksort(data, depth=8)
except CapacityError:
    quicksort(data, depth=1024)
assert data == sorted(data)
```

### Custom gap sequence

`shellsort` accepts `gaps`, an ascending iterable of gap sizes that starts
at 1. Only the leading gaps smaller than the length of the data are used,
from the largest down to the smallest. A gap below 1 among those raises
`ValueError`.

```python
from sortconst.sorting import A366726, shellsort

assert shellsort([5, 3, 1, 4, 2], gaps=[1, 3]) == [1, 2, 3, 4, 5]
assert A366726[:4] == (1, 4, 9, 20)
```