# -*- coding: utf-8 -*-
"""
Test path and rounding utilities

-------------------------------------------------------------------------------


"""

import os

import pytest

from planckview.misc.utils import getProjectRoot, round_half_up


@pytest.mark.fast
def test_project_root(*args, **kwargs):

    root = getProjectRoot()
    assert os.path.exists(os.path.join(root, "default_planckview.json"))
    assert os.path.exists(os.path.join(root, "__version__.txt"))


@pytest.mark.fast
def test_round_half_up(*args, **kwargs):

    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3  # builtin round() gives 2
    assert round_half_up(4500.5) == 4501
    assert round_half_up(4500.49) == 4500
    assert round_half_up(-2.5) == -2
    assert round_half_up(254.06) == 254
    assert isinstance(round_half_up(3.0), int)


def _run_testcases(verbose=True, *args, **kwargs):

    test_project_root()
    test_round_half_up()

    return True


if __name__ == "__main__":
    print("test_utils:", _run_testcases(verbose=True))
