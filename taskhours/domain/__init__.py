"""Domain layer for taskhours.

Pure domain code: the Project aggregate root, its Task entities and the
events they raise. Nothing here performs I/O; events leave the aggregate
only through an injected sink.
"""
