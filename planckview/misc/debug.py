# -*- coding: utf-8 -*-
"""Debug functions

-------------------------------------------------------------------------------
"""


def printdbg(*args, **kwargs):
    """Function that prints only in debug mode. change this at runtime with::

        import planckview
        planckview.config["DEBUG_MODE"] = True

    Examples
    --------

    Embed this print in a if __debug__ statement::

        if __debug__: printdbg(...)

    so that printdbg are removed by the Python preprocessor when running in
    optimize mode::

        python -O *.py

    See the ``"DEBUG_MODE"`` key in :py:attr:`planckview.config`
    """

    import planckview

    if planckview.config["DEBUG_MODE"]:
        print("DEBUG:", *args, **kwargs)
