"""CLI entry point for complex_graph package.

Invoke as:  python scripts/complex_graph --value 3+4i
"""

# Bootstrap: when run as `python scripts/complex_graph` (directory path),
# re-execute through runpy so the package machinery resolves relative imports
# correctly and without DeprecationWarning.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _scripts_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _scripts_dir not in sys.path:
        sys.path.insert(0, _scripts_dir)
    runpy.run_module("complex_graph", run_name="__main__", alter_sys=True)
    raise SystemExit(0)  # unreachable; run_module already calls sys.exit()

import argparse
import os
import sys

from ._common import save
from .errors import ValueParseError
from .model import parse_complex
from .view import render_complex

# ---------------------------------------------------------------------------
# Gallery registry
# ---------------------------------------------------------------------------

GALLERY = [
    ("quadrant_1.png", 3 + 4j),
    ("quadrant_2.png", -2 + 3j),
    ("quadrant_3.png", -2 - 3j),
    ("quadrant_4.png", 3 - 2j),
    ("positive_imaginary.png", 5j),
    ("negative_imaginary.png", -5j),
]


def slug(value):
    """File name for a value, e.g. 3+4j -> complex_3+4i.png."""
    text = f"{value.real:g}{value.imag:+g}i"
    return "complex_" + text.replace(".", "_") + ".png"


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Draw the geometry of a complex number: radius, phase arc and projections."
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--value",
        help="Complex number to draw (e.g. 3+4i, 5i; use --value=-2-3i for a leading minus)",
    )
    group.add_argument("--gallery", action="store_true", help="Draw one diagram per quadrant")
    group.add_argument("--list", action="store_true", help="List gallery diagrams")
    parser.add_argument("-o", "--out", help="Output PNG for --value (default: complex_<value>.png)")
    parser.add_argument("--out-dir", default=".", help="Output folder for --gallery (default: .)")
    args = parser.parse_args(argv)

    if args.list:
        print("Gallery diagrams:")
        for filename, value in GALLERY:
            print(f"    {filename:<26} {value}")
        print(f"\n{len(GALLERY)} diagrams total.")
        return 0

    if args.gallery:
        print(f"{args.out_dir}/")
        for filename, value in GALLERY:
            save(render_complex(value), os.path.join(args.out_dir, filename))
        print(f"\nGenerated {len(GALLERY)} diagram(s).")
        return 0

    try:
        value = parse_complex(args.value)
    except ValueParseError as e:
        print(str(e))
        return 2

    if value.imag == 0.0:
        print(f"{args.value} is purely real; the complex graph needs an imaginary part.")
        return 1

    out = args.out or slug(value)
    save(render_complex(value), out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
