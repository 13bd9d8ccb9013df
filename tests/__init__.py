"""Test suite for keyforge.

Test Structure:
- unit/: Unit tests for individual components, one directory per package
  (animation, easing, curves, physics, presets, clips, export, config,
  utils, cli)
- conftest.py: Shared fixtures and test configuration
"""
