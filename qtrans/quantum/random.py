# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

import numbers

import numpy as np

from qtrans.qobj import Qobj


def _total_dim(dims):
    if isinstance(dims, numbers.Integral):
        dims = (dims,)
    return int(np.prod(dims)), tuple(dims)


def rand_dm(dims, iscomplex=False):
    r"""Generate a random density matrix, i.e., positive semidefinite
    matrix :math:`X\in\mathbb{H}^n` satisfying :math:`\text{tr}[X] = 1`,
    distributed according to the Hilbert-Schmidt measure.

    Parameters
    ----------
    dims : :obj:`int` or :obj:`tuple` of :obj:`int`
        Dimensions ``(n0, n1, ..., nk-1)`` of the subsystems the density
        matrix is defined on.
    iscomplex : :obj:`bool`, optional
        Whether the matrix is real (``False``) or complex (``True``).
        The default is ``False``.

    Returns
    -------
    :class:`~qtrans.Qobj`
        Random density matrix of dimension ``(n, n)`` where
        ``n=n0*n1*...*nk-1``.
    """
    n, dims = _total_dim(dims)
    if iscomplex:
        X = np.random.normal(size=(n, n)) + np.random.normal(size=(n, n)) * 1j
    else:
        X = np.random.normal(size=(n, n))
    rho = X @ X.conj().T
    return Qobj(rho / np.trace(rho), dims, "oper")


def rand_ket(dims, iscomplex=False):
    r"""Generate a random normalized ket :math:`| \psi \rangle`.

    Parameters
    ----------
    dims : :obj:`int` or :obj:`tuple` of :obj:`int`
        Dimensions ``(n0, n1, ..., nk-1)`` of the subsystems the ket is
        defined on.
    iscomplex : :obj:`bool`, optional
        Whether the ket is real (``False``) or complex (``True``).
        The default is ``False``.

    Returns
    -------
    :class:`~qtrans.Qobj`
        Random ket of dimension ``(n, 1)`` where ``n=n0*n1*...*nk-1``.

    Notes
    -----
    See [1]_ for additional details.

    .. [1] Khatri, S. (2020) "Random Pure States".
           https://sumeetkhatri.com/wp-content/uploads/2020/05/random_pure_states.pdf
    """
    n, dims = _total_dim(dims)
    if iscomplex:
        psi = np.random.normal(size=(n, 1)) + np.random.normal(size=(n, 1)) * 1j
    else:
        psi = np.random.normal(size=(n, 1))
    psi /= np.linalg.norm(psi)
    return Qobj(psi, dims, "ket")
