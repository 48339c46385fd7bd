from setuptools import find_namespace_packages, setup

# Physical structure under packages/ matches the import path
packages = find_namespace_packages(where="packages", include=["nlerp.core", "nlerp.core.*"])

setup(
    packages=packages,
    package_dir={"": "packages"},
)
