"""The package contains the tests for Tessera."""

import os

os.environ.setdefault('TESSERA_SETTINGS_MODULE', 'tests.settings')
