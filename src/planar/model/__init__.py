"""
The MODEL layer contains pure data structures and algorithms.
It has NO knowledge of I/O, persistence or presentation.
It deals with Geometry and the extremal searches over it.
"""
