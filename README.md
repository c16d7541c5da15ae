# estruturas

Small, typed data structures for Python, plus a line-oriented shell for
playing with a linked list:

- `estruturas.elements.ElementType`: the kind of value a container holds
  (`INT`, `FLOAT` or `STRING`) and how it is printed.
- `estruturas.linkedlist.LinkedList`: a circular doubly linked list that holds
  values of one `ElementType`.
- `estruturas.dynamic_vector.IntVector`: an integer vector whose capacity
  doubles when it fills up.
- `estruturas.generic_vector.Vector`: a vector of one `ElementType` with
  positional insert, bounds-checked access and tracked capacity.
- `estruturas.tokens.split_args`: splits a command line into words.
- `estruturas.cli`: the interactive list shell.

The package has no runtime dependencies.

## Installation

```
pip install .
```

## Element types

`ElementType.accepts(value)` tells whether a value may be stored:

- `INT` accepts `int`,
- `FLOAT` accepts `int` and `float`,
- `STRING` accepts `str`.

`bool` is never accepted.

`ElementType.format(value)` renders a value. Integers are printed as they are,
floats with two decimals (`1.50`), and strings unchanged.

## Linked list

```python
from estruturas.elements import ElementType
from estruturas.linkedlist import LinkedList, EmptyListError

numbers = LinkedList(ElementType.INT)
numbers.push_back(2)
numbers.push_front(1)
numbers.push_back(3)
print(numbers.format())   # [1, 2, 3]
print(len(numbers))       # 3

numbers.pop_front()       # returns 1
numbers.pop_back()        # returns 3
print(list(numbers))      # [2]

numbers.clear()
print(numbers.is_empty()) # True
```

- `push_front` and `push_back` raise `TypeError("invalid type")` for a value
  the list's `ElementType` does not accept.
- `pop_front` and `pop_back` remove and return a value. They raise
  `EmptyListError`, a subclass of `IndexError`, when the list is empty.
- `clear` also raises `EmptyListError` when the list is already empty.
- Iterating yields the values from front to back.

## Integer vector

```python
from estruturas.dynamic_vector import IntVector

v = IntVector(2)
v.push_back(10)
v.push_back(20)
v.push_front(5)
print(list(v), v.capacity())   # [5, 10, 20] 4
print(v.begin(), v.end())      # 5 20
```

- The initial capacity must be at least 1, otherwise `ValueError` is raised.
- The capacity doubles when a value is added to a full vector.
- `erase(index)` removes the element at `index` only when
  `0 < index < len(v)`. Any other index, including `0`, is silently ignored.
- `begin()` and `end()` return the first and last element and raise
  `IndexError` on an empty vector.

## Typed vector

```python
from estruturas.elements import ElementType
from estruturas.generic_vector import Vector

words = Vector(ElementType.STRING)
words.push_back("b")
words.push_front("a")
words.insert(2, "c")
print(words.format())                            # [ a, b, c ]
print(words.at(1), words.front(), words.back())  # b a c
```

- A new vector has capacity 0. When a value is added to a full vector the
  capacity becomes twice the old one, or 1 if it was 0.
- `reserve(new_capacity)` sets the capacity and ignores requests smaller than
  the current length.
- `push_back`, `push_front` and `insert` raise `TypeError("invalid type")` for
  a value the vector's `ElementType` does not accept.
- `insert(pos, value)` accepts `0 <= pos <= len(v)` and raises `IndexError`
  otherwise.
- `at(index)` raises `IndexError` outside `0 <= index < len(v)`. `front()` and
  `back()` raise `IndexError` on an empty vector.
- `clear()` removes every element and leaves the capacity as it was.
- `format()` renders `[ a, b, c ]`, or `[ ]` when empty.

## Commands

### estruturas-list

```
estruturas-list
```

Reads commands from standard input, one per line, and applies them to a list
of integers until `end` or the end of input. Every line read, `end` included,
is echoed back with a leading `$`.

| Command              | Effect                                       |
|----------------------|----------------------------------------------|
| `push_front N [N..]` | insert each number at the front, in order    |
| `push_back N [N..]`  | append each number at the back, in order     |
| `pop_front`          | remove the first element                     |
| `pop_back`           | remove the last element                      |
| `show`               | print the list, e.g. `[1, 2, 3]`             |
| `size`               | print the number of elements                 |
| `empty`              | print `true` or `false`                      |
| `clear`              | remove every element                         |
| `end`                | stop                                         |

- Words are separated by spaces.
- A number is read from the leading digits of a word, with an optional sign.
  A word that does not start with a number counts as `0`.
- `pop_front`, `pop_back` and `clear` on an empty list print `empty list`.
- Any other command, including an empty line, prints `invalid argument`.

Example session:

```
$ printf 'push_back 1 2 3\nshow\npop_front\nsize\nend\n' | estruturas-list
$push_back 1 2 3
$show
[1, 2, 3]
$pop_front
$size
2
$end
```

The same interpreter is available as a function:
`estruturas.cli.run(lines, out)` executes the commands in `lines` and writes to
the text stream `out`.

### estruturas-vector-demo

```
estruturas-vector-demo
```

Runs a short demonstration of `Vector`. It fills a vector of integers with
1, 3, 5, 7 and 9, pushes 99 to the front and prints the vector and its length.
It then inserts 100 at position 1, prints the vector again and prints whether
it is empty.

## Running the tests

```
pip install .[test]
pytest
```