from setuptools import find_packages, setup

# Physical structure matches the import path: packages/keyforge/core -> keyforge.core
packages = find_packages(where="../..", include=["keyforge.core", "keyforge.core.*"])

setup(
    packages=packages,
    package_dir={"": "../.."},
)
