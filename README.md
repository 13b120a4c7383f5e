# dsakit

Classic data structures written out node by node, so their behaviour can be
read and stepped through:

- `BoundedStack`: a fixed-capacity LIFO stack (`dsakit.stack`)
- `BoundedQueue`: a fixed-capacity linear array queue (`dsakit.array_queue`)
- `SinglyLinkedList`: insert and delete at the front, at the back or at a position, plus search (`dsakit.singly`)
- `DoublyLinkedList`: deletion at either end or at a position, forward and backward traversal (`dsakit.doubly`)
- `CircularLinkedList`: the last node links back to the first (`dsakit.circular`)

Failures raise exceptions from `dsakit.errors`. All of them are subclasses of
`StructureError`:

- `EmptyError` (also an `IndexError`): the operation needs at least one element and the structure is empty
- `CapacityError` (also an `OverflowError`): a bounded structure is full
- `InvalidPositionError` (also an `IndexError`): the position is outside the list

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Usage

```python
from dsakit.stack import BoundedStack
from dsakit.array_queue import BoundedQueue
from dsakit.singly import SinglyLinkedList
from dsakit.doubly import DoublyLinkedList
from dsakit.circular import CircularLinkedList
from dsakit.errors import CapacityError

stack = BoundedStack(2)
stack.push(90)
stack.push(97)
stack.peek()         # 97
stack.pop()          # 97
list(stack)          # [90], listed from top to bottom

queue = BoundedQueue(3)
for value in (1, 2, 3):
    queue.enqueue(value)
queue.dequeue()      # 1
try:
    queue.enqueue(4)
except CapacityError:
    ...              # all slots used; full until drained completely

items = SinglyLinkedList([10, 20, 30])
items.insert_first(5)
items.insert_at(2, 15)
items.delete_last()  # 30
20 in items          # True
str(items)           # "5 -> 15 -> 10 -> 20 -> NULL"

both_ways = DoublyLinkedList([1, 2, 3])
both_ways.delete_at(2)      # 2
list(reversed(both_ways))   # [3, 1]

ring = CircularLinkedList([1, 2, 3])
ring.insert_first(0)
ring.delete_last()   # 3
list(ring)           # [0, 1, 2]
str(ring)            # "0->1->2->"
```

Notes on behaviour:

- Positions are counted from 1.
- `BoundedQueue` does not reuse slots: once `capacity` values have been
  enqueued it stays full until every value has been dequeued.
- `SinglyLinkedList` is built with its constructor or `append`; its
  `insert_first`, `insert_last`, `insert_at` and `search` raise `EmptyError`
  on an empty list. `insert_at(position, value)` places the value at
  `position` (1 to `len + 1`).
- `CircularLinkedList.insert_at(position, value)` places the value right
  after the element at `position` (1 to `len`).

## Command line

The `dsakit` command builds one structure and runs the operations given as
arguments, printing one line per operation:

```
dsakit stack [--capacity N] [OPERATION ...]      # default capacity 10
dsakit queue [--capacity N] [OPERATION ...]      # default capacity 3
dsakit singly [--values 1,2,3] [OPERATION ...]
dsakit circular [--values 1,2,3] [OPERATION ...]
dsakit doubly [--values 1,2,3] [OPERATION ...]
```

Operations, each followed by its integer arguments:

- stack: `push V`, `pop`, `peek`, `show`
- queue: `enqueue V`, `dequeue`, `show`
- singly: `insert-first V`, `insert-last V`, `insert-at POS V`, `delete-first`, `delete-last`, `delete-at POS`, `search V`, `show`
- circular: the same as singly, without `search`
- doubly: `append V`, `delete-first`, `delete-last`, `delete-at POS`, `show`

For example:

```
dsakit singly --values 10,20,30 insert-first 5 delete-at 3 show
```

With no operations, `stack` and `queue` run a short demonstration sequence and
the linked lists just `show` their initial values. A failed operation is
reported on standard error and the remaining operations still run; the exit
status is 1 if any operation failed. The command is not interactive: it reads
nothing from standard input.