"""Shamir secret reconstruction (shrec).

Decodes arbitrary-base shares and recovers the secret by exact Lagrange
interpolation at x=0.
"""

__version__ = "0.1.0"
