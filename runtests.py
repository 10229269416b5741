#!/usr/bin/env python
"""
Run the test suites module by module through Django's test runner.
"""

import os
import subprocess
import sys

TEST_MODULES = [
    "base.test_system_endpoints",
    "apps.uml_diagrams.tests",
    "apps.code_generation.tests",
    "apps.ai_assistant.tests",
]


def run_tests():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'base.settings')

    failures = 0
    for test_module in TEST_MODULES:
        print(f"\n=== Running {test_module} ===")
        result = subprocess.run([sys.executable, "manage.py", "test", test_module])
        if result.returncode != 0:
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(run_tests())
