"""Run the demo: python -m pycurves.demo [seed]"""

import sys

from pycurves.demo.solvers import run_demo


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        seed = int(argv[0]) if argv else None
    except ValueError:
        print("usage: python -m pycurves.demo [seed]", file=sys.stderr)
        return 2
    print(run_demo(seed=seed).summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
