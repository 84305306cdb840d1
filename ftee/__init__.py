"""ftee: a many-to-many streaming text splitter.

ftee reads every line of each input file in turn. A line ending with
``DELIMITER outfile1 [outfile2 ...]`` opens the named output files and
makes them the current targets; every following line is copied to each
current target until the next delimiter line.

A run is all-or-nothing: if anything goes wrong, every output file the run
created is removed again.
"""

__version__ = "1.0.0"
__description__ = "Many-to-many file splitter driven by inline delimiter lines"

from ftee.core.classifier import classify
from ftee.core.router import StreamRouter
from ftee.core.runner import split_files

__all__ = ["classify", "StreamRouter", "split_files", "__version__"]
