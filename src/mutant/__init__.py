"""mutant — mutation testing command-line front end.

Parses the command line into an immutable run configuration and hands it
to the environment bootstrap and runner collaborators.
"""

from mutant.version import VERSION, __version__

__all__: list[str] = ["VERSION", "__version__"]
