# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.


class Settings:
    r"""Global options shared by all QTRANS routines. Options are changed
    by assigning to the attributes of :data:`qtrans.settings`, e.g.,
    ``qtrans.settings.verbose = 1``.

    Parameters
    ----------
    verbose : {``0``, ``1``, ``2``}, optional
        Verbosity level, where

        - ``0`` : No output.
        - ``1`` : Print a summary of each partial transpose, and notices
          about the input data (e.g., summed duplicate entries).
        - ``2`` : Also print the time taken by each partial transpose.

        The default is ``0``.
    tidyup_tol : :obj:`float`, optional
        Entries with absolute value below this threshold are dropped when
        converting to sparse storage without an explicit tolerance. The
        default is ``1e-14``.
    auto_tidyup : :obj:`bool`, optional
        Whether sparse results of the partial transpose should drop
        explicitly stored zeros. The default is ``True``.
    """

    def __init__(self, verbose=0, tidyup_tol=1e-14, auto_tidyup=True):
        self.verbose = verbose
        self.tidyup_tol = tidyup_tol
        self.auto_tidyup = auto_tidyup

    def __repr__(self):
        return (
            f"Settings(verbose={self.verbose!r}, "
            f"tidyup_tol={self.tidyup_tol!r}, "
            f"auto_tidyup={self.auto_tidyup!r})"
        )


settings = Settings()
