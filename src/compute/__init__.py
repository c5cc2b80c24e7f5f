"""
Orbit computation backends
"""

from compute.cpu_backend import CPUBackend, CPUKernels
from compute.trajectory import generate_points, generate_trajectory, validate_window

__all__ = ['CPUBackend', 'CPUKernels', 'generate_points', 'generate_trajectory', 'validate_window']
