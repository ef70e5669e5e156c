# -*- coding: utf-8 -*-
"""
================================
Sweep from red dwarfs to A stars
================================

Drive the simulator with the animated temperature sweep (3865 K to 7600 K and
back, in 8 s), and print how the peak wavelength and the visible energy
fraction evolve.

A renderer would draw each dataset instead of printing it.

"""

from planckview import DatasetAssembler
from planckview.tools.controls import TemperatureSweep

sim = DatasetAssembler(verbose=1)
sweep = TemperatureSweep()

for T in sweep.frames(fps=2):
    sim.compute(T)
