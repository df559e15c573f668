"""Testing utilities for projects that read configuration through envs.

Load the fixtures as a pytest plugin from the project's conftest.py:
    pytest_plugins = ["envs.testing.pytest_fixtures"]

Fixtures provided:
- isolated_cwd: run from an empty temporary working directory
- env_file: write a source file and get its path
- config_store: build and load a ConfigStore from file content and env vars
"""
