"""Console workbench of a task heap, polynomials, a hashed vocabulary and Huffman coding."""

__version__ = "0.1.0"
__all__ = ["cli", "hashtable", "huffman", "minheap", "polynomial", "vocabulary"]