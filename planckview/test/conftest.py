# -*- coding: utf-8 -*-
"""pytest configuration of the planckview test suite

Run all tests::

    pytest       (in command line, in project folder)

Run only fast tests (i.e: tests that have a 'fast' label)::

    pytest -m fast
"""


def pytest_configure(config):
    config.addinivalue_line("markers", "fast: tests that run in a few seconds")
