"""Simulation building blocks: voxel chunks, temporal LOD, entities with needs and metabolism, and physiology models."""

__version__ = "1.0.0"