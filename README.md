# dsworkbench

A small console workbench for exploring classic data structures:

- **Scheduler**: tasks with integer priorities are kept in an array-backed
  binary heap (`dsworkbench.minheap.MinHeap`, `Process`). The task with the
  *largest* priority value sits at the root and is the one `extract_min()`
  returns. Given a `log` callable, the heap reports every insert, swap and
  heap state as a line of text.
- **Polynomials**: sparse integer polynomials
  (`dsworkbench.polynomial.Polynomial`, `Term`). `+` merges two polynomials
  whose terms are in descending exponent order, dropping terms that cancel.
  `*` multiplies term by term and returns the result in descending exponent
  order without zero terms. `format()` and `format_together()` render them
  as text.
- **Vocabulary**: text is split into lower-cased ASCII words
  (`dsworkbench.vocabulary.tokenize`). Each new word gets the next integer
  id, starting at 0 (`Vocabulary`). Ids are stored in a fixed-size chained
  hash table (`dsworkbench.hashtable.HashTable`). Unknown words encode as
  `-1`.
- **Huffman compression**: a list of weights is stored as float32 values and
  compressed into a self-contained little-endian file. The file holds the
  codebook followed by the packed bit stream
  (`dsworkbench.huffman.compress_weights`, `decompress_weights`, and the
  lower-level `encode`, `decode`, `read_bitstream`,
  `build_huffman_tree`, `generate_codebook`, `format_codebook`).

## Installation

```
pip install .
```

## Command line

```
dsworkbench [--corpus PATH] [--vocab-output PATH] [--weights PATH] [--compressed PATH]
```

This opens a menu. Enter a number to choose a tool, or `0` to quit:

- **2 – Scheduler**: enter tasks as `name priority`, one per line. Enter
  `down` to build the heap and start running the tasks. The largest priority
  value runs first. While they run, press Enter for the next task, enter
  `add` to go back to adding tasks, or enter `0` to return to the menu.
- **3 – Polynomial**: enter the first polynomial as `coefficient exponent`
  pairs, with exponents in descending order, then `next`. Enter the second
  one the same way and finish it with `done`. The tool prints both
  polynomials, their sum and their product.
- **4 – Vocabulary**: builds a vocabulary from the corpus file (default
  `corpus.txt`). It encodes a sentence you type and writes the vocabulary
  size to a small YAML file (default `vocab.yml`). It then lists every word
  with its id.
- **5 – Huffman**: reads whitespace-separated weights from the weights file
  (default `weights.txt`), prints the codebook and writes the compressed file
  (default `model.huff`). It then shows the packed bit stream in
  hexadecimal. Enter `dec` to decompress the file and print the restored
  weights.

Malformed input, such as a missing exponent, is reported with an error
message, and the menu is shown again.

## Library use

```python
from dsworkbench.polynomial import Polynomial, format_together
from dsworkbench.minheap import MinHeap, Process
from dsworkbench.huffman import compress_weights, decompress_weights

p1 = Polynomial.from_pairs([(3, 2), (1, 0)])
p2 = Polynomial.from_pairs([(2, 1), (-1, 0)])
print(format_together(p1, p2, p1 + p2, p1 * p2))

heap = MinHeap(log=print)
heap.insert(Process(2, "backup"))
heap.insert(Process(1, "boot"))
print(heap.extract_min().name)  # backup: the larger priority value comes out first

codebook = compress_weights([1.0, 2.0, 1.0, 3.0], "model.huff")
print(decompress_weights("model.huff"))  # [1.0, 2.0, 1.0, 3.0]
```

## What it does not do

There is no grid path-finding tool and no graphical window. Codebooks and
polynomials are printed as text on the console.

## Running the tests

```
pip install .[test]
pytest
```