# -*- coding: utf-8 -*-
"""Physical constants.

Note : more constants available in :py:mod:`astropy.constants`


-------------------------------------------------------------------------------
"""

# %% SI units

h = 6.62607015e-34
"""float: Planck constant (m2.kg.s-1 = J.s)

https://physics.nist.gov/cgi-bin/cuu/Value?h|search_for=planck"""

k_b = 1.380649e-23
"""float: Boltzmann constant (m2.kg.s-2.K-1)

https://physics.nist.gov/cgi-bin/cuu/Value?k|search_for=boltzmann
"""

c = 2.99792458e8
"""float: light velocity (m/s)

https://physics.nist.gov/cgi-bin/cuu/Value?c
"""

b_wien = 2.897771955e-3
"""float: Wien wavelength displacement law constant (m.K)

https://physics.nist.gov/cgi-bin/cuu/Value?bwien"""

sigma_sb = 5.670374419e-8
"""float: Stefan-Boltzmann constant (W.m-2.K-4)

https://physics.nist.gov/cgi-bin/cuu/Value?sigma"""

EXP_OVERFLOW_LIMIT = 700
"""float: largest exponent in Planck's law that is still evaluated. Above,
``exp`` overflows double precision (~709.78) and the radiance is set to 0"""
