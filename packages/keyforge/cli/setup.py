from setuptools import find_packages, setup

# Physical structure matches the import path: packages/keyforge/cli -> keyforge.cli
packages = find_packages(where="../..", include=["keyforge.cli", "keyforge.cli.*"])

setup(
    packages=packages,
    package_dir={"": "../.."},
)
