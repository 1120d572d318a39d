import sys

__version__ = "0.1.0"


def main() -> int:
    """Console entrypoint; returns the process exit code.

    Imports the flow lazily so ``import dot_dev`` stays cheap for callers
    that only need the model or prompt helpers.
    """
    from .main_flow import main as _main

    return _main(sys.argv[1:])


__all__ = ["main", "__version__"]
