"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of the command line or of the batch loop.
It deals with the jag profile, sampling, symmetry and file I/O.
"""
