"""Collaborators of the composition model"""

from .accelerator import Accelerator, Capability, FallbackAccelerator

__all__ = ['Accelerator', 'Capability', 'FallbackAccelerator']
