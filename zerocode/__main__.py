"""Package entry point for ``python -m zerocode``.

WHY: Users run the generator as ``python -m zerocode generate`` when the
console script is not on PATH.

HOW: Delegates straight to the CLI's main() function.
"""

from zerocode.cli import main

if __name__ == "__main__":
    main()
