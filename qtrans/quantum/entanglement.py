# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

import numpy as np

from qtrans._backend import array_module
from qtrans.exceptions import DimensionMismatch
from qtrans.qobj import ket2dm
from qtrans.quantum.operator import partial_transpose


def negativity(rho, subsys, logarithmic=False):
    r"""Computes the negativity

    .. math::

        \mathcal{N}(\rho) = \frac{\| \rho^{T_A} \|_1 - 1}{2},

    or the logarithmic negativity

    .. math::

        E_N(\rho) = \log_2 \| \rho^{T_A} \|_1,

    of a multipartite quantum state :math:`\rho`, where :math:`T_A`
    denotes the partial transpose on the subsystem ``subsys`` and
    :math:`\|\cdot\|_1` is the trace norm.

    Parameters
    ----------
    rho : :class:`~qtrans.Qobj`
        Density matrix, or a ket or bra representing a pure state.
    subsys : :obj:`int`
        Which subsystem to take the partial transpose of.
    logarithmic : :obj:`bool`, optional
        Whether to return the logarithmic negativity (``True``) or the
        negativity (``False``). The default is ``False``.

    Returns
    -------
    :obj:`float`
        The (logarithmic) negativity of ``rho``.

    Notes
    -----
    A state with positive negativity is entangled across the bipartition
    between ``subsys`` and the remaining subsystems. The converse is only
    true for ``2 x 2`` and ``2 x 3`` systems.
    """
    if not rho.isoper:
        rho = ket2dm(rho)
    if not 0 <= subsys < len(rho.dims):
        raise DimensionMismatch(
            f"Subsystem {subsys} out of range for a Qobj with dims {rho.dims}."
        )

    mask = [k == subsys for k in range(len(rho.dims))]
    rho_pt = partial_transpose(rho, mask).full()

    xp = array_module(rho.device)
    if not np.issubdtype(rho_pt.dtype, np.inexact):
        rho_pt = rho_pt.astype(np.float64)
    eig = xp.linalg.eigvalsh(rho_pt)
    tr_norm = float(abs(eig).sum())

    if logarithmic:
        return np.log2(tr_norm)
    return (tr_norm - 1) / 2
