#!/usr/bin/env python3
"""
Run All Tests
=============

Portable test runner. Works from any location:
    python3 src/run_tests.py            # everything
    python3 src/run_tests.py core       # tests/core only
    python3 src/run_tests.py animation  # tests/animation only

The script sets PYTHONPATH to src/ before calling pytest.
"""

import os
import subprocess
import sys
from pathlib import Path

SUITES = ('core', 'animation')


def main(argv):
    """Run the selected test suites (default: all)."""
    src_root = Path(__file__).parent.resolve()

    selected = [a for a in argv if a in SUITES]
    unknown = [a for a in argv if a not in SUITES]
    if unknown:
        print(f"Unknown suite(s): {', '.join(unknown)} (choose from {', '.join(SUITES)})")
        return 2
    targets = [f"tests/{s}" for s in selected] or ['tests/']

    env = os.environ.copy()
    pythonpath = env.get('PYTHONPATH', '')
    env['PYTHONPATH'] = f"{src_root}{os.pathsep}{pythonpath}" if pythonpath else str(src_root)

    result = subprocess.run(
        [sys.executable, '-m', 'pytest', *targets, '-v', '--tb=short'],
        cwd=src_root,
        env=env,
    )

    return result.returncode


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
