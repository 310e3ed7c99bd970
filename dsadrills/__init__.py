"""Classic data-structure and algorithm drills: numbers, bits, hashing, arrays,
sorting, strings, recursion, patterns, binary trees and linked lists."""

__version__ = "0.1.0"