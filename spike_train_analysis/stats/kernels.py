"""Smoothing kernels, and the overlap integrals of pairs of them."""
import numpy as np


def normal(*params):
    """Unit-mass Gaussian kernel.

    Called as ``normal(sigma)`` or ``normal(mu, sigma)``. Returns a function
    of (an array of) separations.
    """
    if len(params) == 1:
        mu, sigma = 0.0, params[0]
    elif len(params) == 2:
        mu, sigma = params
    else:
        raise TypeError("normal takes (sigma) or (mu, sigma), got "
                        f"{len(params)} arguments.")
    if not sigma > 0:
        raise ValueError(f"Kernel width sigma must be > 0, found: {sigma}")
    norm = 1/(sigma*np.sqrt(2*np.pi))

    def kernel(x):
        return norm*np.exp(-0.5*np.square(np.subtract(x, mu))/sigma**2)
    return kernel


def normal_product_integral(sigma):
    r"""Overlap of two Gaussian kernels as a function of their separation.

    For two unit-mass Gaussians of width :math:`\sigma` whose centers are
    :math:`x` apart,

    .. math::

        \int N_\sigma(t) N_\sigma(t - x) dt = N_{\sqrt{2}\sigma}(x).
    """
    return normal(np.sqrt(2)*sigma)


npi = normal_product_integral
