#!/usr/bin/env python3
"""Run SRP tests.

Assumes srp_client is installed (e.g., via pip install -e .)
"""

import sys
import unittest


if __name__ == '__main__':
    loader = unittest.TestLoader()
    suite = loader.discover('tests/srp', pattern='test_*.py')

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    # Exit with appropriate code
    sys.exit(0 if result.wasSuccessful() else 1)
