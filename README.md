# redblack

A small red-black tree that holds unique integers. When you insert a
value, the tree recolours and rotates nodes to stay balanced. You can
test whether a value is in the tree, get the minimum and maximum, iterate
over the values in sorted order, and render the tree in infix, prefix or
postfix order with each node's colour.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from redblack.tree import RedBlackTree, DuplicateValueError, EmptyTreeError

tree = RedBlackTree()
for value in (12, 11, 15, 5, 13, 7):
    tree.insert(value)

tree.to_prefix_string()   # " B12  B7  R5  R11  B15  R13 "
tree.to_infix_string()    # " R5  B7  R11  B12  R13  B15 "
tree.to_postfix_string()  # " R5  R11  B7  R13  B15  B12 "

13 in tree                # True
tree.contains(42)         # False
len(tree)                 # 6
list(tree)                # [5, 7, 11, 12, 13, 15]
tree.min(), tree.max()    # (5, 15)
repr(tree)                # "RedBlackTree([5, 7, 11, 12, 13, 15])"
```

You can also create a tree that already holds one value:

```python
single = RedBlackTree(15)
single.to_prefix_string()  # " B15 "
```

Each node is written as a space, its colour (`R` for red, `B` for
black), its value and another space. An empty tree renders as `""`.

The `in` operator returns `False` for anything that is not an `int`.
`contains()` compares the value it is given directly.

### Copies

`tree.copy()` and `copy.copy(tree)` return an independent tree with the
same shape, the same colours and the same size. Later inserts into one
tree do not affect the other.

### Errors

- `insert()` raises `DuplicateValueError`, a subclass of `ValueError`,
  when the value is already in the tree.
- `min()` and `max()` raise `EmptyTreeError`, a subclass of
  `RuntimeError`, when the tree is empty.

### Colours

The `Color` integer enumeration names the node colours: `Color.RED`
(0), `Color.BLACK` (1) and `Color.DOUBLE_BLACK` (2). Its `symbol`
property returns `"R"` for red and `"B"` for any other colour. Nodes in
the tree are only ever red or black.

## Limitations

The tree supports insertion only. It cannot remove values, and it has
no command-line interface and no persistent storage.