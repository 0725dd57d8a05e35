"""Settings package.

``base`` holds the configuration read from the environment; ``test`` pins
an in-memory SQLite database for the test suite.
"""
